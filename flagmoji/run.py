import logging

from .logging_utils import setup_logging
from .bot.app import create_bot, get_token


def main() -> None:
    setup_logging()
    logging.getLogger("boot").info("Starting flagmoji bot ...")
    bot = create_bot()
    try:
        # log_handler=None: keep the handler installed by setup_logging().
        bot.run(get_token(), log_handler=None)
    except KeyboardInterrupt:
        logging.getLogger("boot").info("Exited (KeyboardInterrupt).")


if __name__ == "__main__":
    main()
