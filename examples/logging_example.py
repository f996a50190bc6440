"""Emit EMF lines through the standard logging module.

Run with:
    AWS_EMF_NAMESPACE=Checkout AWS_EMF_SERVICE_NAME=cart python examples/logging_example.py
"""

import logging
import sys

from emfpy import EmfFormatter

handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(EmfFormatter())

logger = logging.getLogger("checkout")
logger.setLevel(logging.INFO)
logger.addHandler(handler)


if __name__ == "__main__":
    logger.info(
        "order placed",
        extra={
            "order_id": "o-42",
            "emf_metrics": {"Orders": (1, "Count"), "OrderValue": 59.9},
            "emf_dimensions": {"PaymentMethod": "card"},
        },
    )
