"""Console front end tests."""
import io

import pytest

from shopping_cart.presentation.console import run
from shopping_cart.presentation.dependencies import Dependencies


@pytest.fixture(autouse=True)
def reset_dependencies():
    """Reset dependencies around every test."""
    Dependencies.reset()
    Dependencies.set_currency_formatter(lambda amount: f"{amount:.2f}")
    yield
    Dependencies.reset()


def run_commands(*commands: str) -> str:
    stdout = io.StringIO()
    exit_code = run(io.StringIO("\n".join(commands) + "\n"), stdout)
    assert exit_code == 0
    return stdout.getvalue()


class TestConsole:
    """run() tests."""

    def test_shows_catalog_and_empty_cart(self) -> None:
        """Startup renders the catalog and the empty cart."""
        output = run_commands()
        assert "== Laptop ==" in output
        assert "Your cart is empty." in output

    def test_add_and_totals(self) -> None:
        """Commands mutate the cart and re-render it."""
        output = run_commands("add P001", "add P002", "inc P002")
        assert output.rstrip().endswith("Items: 3\nTotal: 1251.00")

    def test_dec_to_zero(self) -> None:
        """dec on the last unit empties the cart."""
        output = run_commands("add P003", "dec P003")
        assert output.rstrip().endswith("Your cart is empty.\nItems: 0\nTotal: 0.00")

    def test_unknown_product_reports_error(self) -> None:
        """Unknown product ids print an error and the unchanged cart."""
        output = run_commands("add P999")
        assert "Error: Product not found" in output

    def test_unknown_command(self) -> None:
        """Unknown commands point to help."""
        assert "Unknown command: buy P001" in run_commands("buy P001")

    def test_quit_stops_reading(self) -> None:
        """Commands after quit are ignored."""
        output = run_commands("quit", "add P001")
        assert "P001 | Laptop" not in output

    def test_help_and_cart(self) -> None:
        """help lists the commands and cart prints the current cart."""
        output = run_commands("help", "add P001", "cart")
        assert "rem <id>" in output
        assert output.count("P001 | Laptop | 1") == 2
