"""
Keyword tables driving the heuristic extractors.

New document variants are supported by extending these tables; the
extractors themselves only know how to scan lines against a keyword set.
"""

from dataclasses import dataclass

# Classification gate: any of these in the lower-cased document text
ORDER_DOCUMENT_KEYWORDS = ("order", "loading", "consignee", "shipment")

# Party roles
SENDER_KEYWORDS = ("shipper", "sender", "customer")
RECEIVER_KEYWORDS = ("consignee", "receiver", "delivery")

# Date cues
LOADING_DATE_KEYWORD = "loading date"
DELIVERY_DATE_KEYWORD = "delivery date"

# Single-value fields
ORDER_REFERENCE_KEYWORDS = ("order ref", "customer ref", "our ref")
TRANSPORT_NUMBER_KEYWORDS = ("truck", "vehicle", "registration")
COMMENT_KEYWORDS = ("comment", "note")
INCOTERMS_KEYWORDS = ("incoterms",)

# A line containing any of these is a cargo row candidate
CARGO_ROW_KEYWORDS = ("qty", "quantity", "weight", "pcs", "kg")


@dataclass(frozen=True)
class KeywordTable:
    """Bundle of keyword sets handed to the order assembler."""

    order_document: tuple[str, ...] = ORDER_DOCUMENT_KEYWORDS
    sender: tuple[str, ...] = SENDER_KEYWORDS
    receiver: tuple[str, ...] = RECEIVER_KEYWORDS
    loading_date: str = LOADING_DATE_KEYWORD
    delivery_date: str = DELIVERY_DATE_KEYWORD
    order_reference: tuple[str, ...] = ORDER_REFERENCE_KEYWORDS
    transport_numbers: tuple[str, ...] = TRANSPORT_NUMBER_KEYWORDS
    comment: tuple[str, ...] = COMMENT_KEYWORDS
    incoterms: tuple[str, ...] = INCOTERMS_KEYWORDS
    cargo_row: tuple[str, ...] = CARGO_ROW_KEYWORDS


DEFAULT_KEYWORDS = KeywordTable()
