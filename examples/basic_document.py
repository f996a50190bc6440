"""Build an EMF document by hand and print it.

Run with:
    python examples/basic_document.py
"""

from emfpy import DimensionSet, MetricsContext, Unit


def main() -> None:
    context = MetricsContext(namespace="Checkout")
    context.set_default_dimensions(DimensionSet({"Stage": "prod"}))
    context.put_dimensions(DimensionSet({"Service": "Cart"}))
    context.put_dimensions(DimensionSet({"Service": "Cart", "Operation": "Add"}))

    context.put_metric("Latency", 12.5, Unit.MILLISECONDS)
    context.put_metric("Latency", 9.0, Unit.MILLISECONDS)
    context.put_metric("Items", 3, Unit.COUNT)
    context.put_property("RequestId", "req-1234")

    print(context.serialize())


if __name__ == "__main__":
    main()
