"""python -m shopping_cart."""
import sys

from shopping_cart.presentation.console import main

sys.exit(main())
