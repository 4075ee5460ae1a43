"""Customer postal address."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address owned by exactly one customer.

    ``zip`` is text so leading zeros survive. Optional parts may be empty
    strings; values are stored exactly as given.
    """

    address1: str
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
