# console.py
import config
from responder import Responder, split_words
from responses import QUIT_WORD, farewell_text, welcome_text


def chat(responder, read=input, write=print):
    write(welcome_text)
    while True:
        try:
            text = read("> ")
        except EOFError:
            break
        if text.strip().lower() == QUIT_WORD:
            break
        write(responder.generate_response(split_words(text)))
    write(farewell_text)


def main():
    config.configure_logging()
    chat(Responder(config.RESPONSES_FILE, config.DEFAULT_RESPONSES_FILE))


if __name__ == '__main__':
    main()
