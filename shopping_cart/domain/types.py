"""Shared type aliases."""
from typing import Union

# Plain numeric amount; the domain never formats currency.
Amount = Union[int, float]
