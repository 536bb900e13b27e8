"""
Strategy Selector

Builds a fresh shipping strategy for a ShippingKind.

USAGE
-----
    from shipping.factory import select_strategy
    strategy = select_strategy(ShippingKind.EXPEDITED)
    strategy = select_strategy(request["shipping_method"])   # parsed, may raise
"""

import logging

from .notifications import Notifier
from .strategies import (
    ShippingKind,
    ShippingStrategy,
    get_strategy_class,
)

logger = logging.getLogger(__name__)


def select_strategy(
    kind: ShippingKind | str,
    notifier: Notifier | None = None
) -> ShippingStrategy:
    """
    Create the shipping strategy for a kind.

    A new instance is returned on every call; callers must not rely on
    instances being shared.

    Args:
        kind: ShippingKind, or a method name from external input
        notifier: Customer notifier, passed only to strategies that notify

    Returns:
        Newly constructed strategy

    Raises:
        InvalidStrategyError: If kind is not a known shipping strategy
    """
    kind = ShippingKind.parse(kind)
    strategy_class = get_strategy_class(kind)

    if strategy_class.notifies_customer:
        strategy = strategy_class(notifier)
    else:
        strategy = strategy_class()

    logger.debug("Selected %s for %s", strategy_class.__name__, kind.value)
    return strategy


__all__ = ["select_strategy"]
