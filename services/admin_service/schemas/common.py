"""Field types shared by the response schemas."""

from decimal import Decimal
from typing import Annotated

from libs.common.currency import amount_to_json
from pydantic import PlainSerializer

# Fixed-point in Python, a plain number on the wire
Money = Annotated[
    Decimal, PlainSerializer(amount_to_json, return_type=float, when_used="json")
]
