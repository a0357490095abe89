"""
orderstream – order lifecycle events, dispatch and transformation.

Import path convention::

    from orderstream.domain import Order, OrderEvent
    from orderstream.application.dispatch import OrderDispatcher
    from orderstream.application.pipeline import StageRunner, default_bindings
    from orderstream.resilience.retry import RetryPolicy, FAST_PROFILE
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
