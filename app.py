# app.py
import logging

from flask import Flask, request, jsonify

import config
from responder import Responder, split_words
from responses import FALLBACK_RESPONSE

logger = logging.getLogger(__name__)


def create_app(responder=None):
    # must run before the responder loads its files
    config.configure_logging()
    app = Flask(__name__)
    bot = responder or Responder(config.RESPONSES_FILE, config.DEFAULT_RESPONSES_FILE)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'ok',
            'keywords': len(bot.response_map),
            'defaults': len(bot.default_responses),
        })

    @app.route('/get', methods=['POST'])
    def get_bot_response():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        message = data.get('message') or ''
        if not isinstance(message, str):
            message = ''
        try:
            reply = bot.generate_response(split_words(message))
        except Exception:
            logger.exception("Failed to generate a reply for %r", message)
            reply = FALLBACK_RESPONSE
        return jsonify({'reply': reply})

    return app


app = create_app()

if __name__ == '__main__':
    # debug True for dev only
    app.run(debug=config.DEBUG)
