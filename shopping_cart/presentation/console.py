"""Line-oriented front end wiring user commands to the intent handlers."""
import logging
import sys
from typing import TextIO

from .dependencies import configure_logging
from .handlers import INTENT_KEYS, get_cart, handle_intent, start_session

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  add <id>   add a product from the catalog
  inc <id>   one more unit
  dec <id>   one unit less (removes the line at zero)
  rem <id>   remove the line
  cart       show the cart
  products   show the catalog
  help       show this text
  quit       leave"""


def run(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """Read commands until EOF or quit.

    Returns:
        process exit code
    """
    session = start_session()
    cart_id = session["cart_id"]
    print(session["rendered_products"], file=stdout)
    print(file=stdout)
    print(session["rendered"], file=stdout)

    for raw in stdin:
        parts = raw.split()
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            break
        if command == "help":
            print(HELP_TEXT, file=stdout)
            continue
        if command == "products":
            print(session["rendered_products"], file=stdout)
            continue
        if command == "cart":
            print(get_cart(cart_id)["rendered"], file=stdout)
            continue
        if command not in INTENT_KEYS or len(args) != 1:
            print(f"Unknown command: {raw.strip()} (type 'help')", file=stdout)
            continue

        response = handle_intent({command: args[0]}, cart_id)
        if response["status"] == "error":
            print(f"Error: {response['error']['message']}", file=stdout)
        if "rendered" in response:
            print(response["rendered"], file=stdout)

    logger.info("Session for cart %s ended", cart_id)
    return 0


def main() -> int:
    """Console entry point."""
    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    configure_logging()
    return run()
