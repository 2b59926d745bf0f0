"""
Underlying equity description.
"""

from option_valuation.errors import require_positive


class Stock:
    """
    An equity underlying with a current price and a constant volatility.

    The current price may be moved after construction (e.g. to revalue a book
    at a shocked spot); volatility is fixed for the lifetime of the object.
    Both are always strictly positive.

    Parameters
    ----------
    current_price : float
        Current price of the stock
    volatility : float
        Annualized volatility (decimal)

    Examples
    --------
    >>> stock = Stock(current_price=100, volatility=0.1)
    >>> stock.current_price = 105.0
    >>> stock.volatility
    0.1
    """

    def __init__(self, current_price: float, volatility: float):
        self._current_price = float(require_positive("current_price", current_price))
        self._volatility = float(require_positive("volatility", volatility))

    @property
    def current_price(self) -> float:
        """Current price of the stock."""
        return self._current_price

    @current_price.setter
    def current_price(self, value: float) -> None:
        self._current_price = float(require_positive("current_price", value))

    @property
    def volatility(self) -> float:
        """Annualized volatility."""
        return self._volatility

    def __repr__(self) -> str:
        return f"Stock(current_price={self._current_price}, volatility={self._volatility})"
