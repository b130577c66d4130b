from order_intake.order_extractor.cargo import extract_cargos
from order_intake.order_extractor.classifier import should_handle
from order_intake.order_extractor.company import extract_company, normalize_company
from order_intake.order_extractor.fields import extract_date, extract_line_value
from order_intake.order_extractor.lines import normalize_lines
from order_intake.order_extractor.pipeline import OrderAssembler

__all__ = [
    "OrderAssembler",
    "extract_cargos",
    "extract_company",
    "extract_date",
    "extract_line_value",
    "normalize_company",
    "normalize_lines",
    "should_handle",
]
