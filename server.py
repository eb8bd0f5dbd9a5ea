#!/usr/bin/env python3

import logging

from bottle import Bottle, static_file

import settings

app = application = Bottle()

# Configure logging
level = logging.getLevelName(settings.LOG_LEVEL)
logging.basicConfig(level=level, format='%(asctime)s [%(levelname)s] %(message)s')


def log(msg):
    logging.info(msg)


@app.route('/')
def main_page():
    return static_file('index.html', root=settings.SITE_ROOT)


@app.route('/<filepath:path>')
def static(filepath):
    """Serve any other path from the site root."""
    return static_file(filepath, root=settings.SITE_ROOT)


if __name__ == '__main__':
    from bottle import run
    log(f"Server running on port {settings.PORT}")

    # A port already in use raises here and ends the process.
    run(app=application,
        host=settings.HOST,
        port=settings.PORT,
        server=settings.SERVER,
        debug=settings.DEBUG_APP,
        reloader=settings.DEBUG_APP
    )
