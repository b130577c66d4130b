from fastapi import Request

from order_intake.order_extractor.pipeline import OrderAssembler
from order_intake.services.order_sink import OrderSink, SchemaValidatingSink


def get_order_sink() -> OrderSink:
    return SchemaValidatingSink()


def get_order_assembler(request: Request) -> OrderAssembler:
    return OrderAssembler(request.app.state.settings, sink=get_order_sink())
