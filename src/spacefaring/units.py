"""
Dimension-checked physical quantities.

A Quantity is a numeric value (float, numpy scalar or numpy array) tagged
with a Unit. Every Unit knows its scale factor to SI and its Dimension, a
vector of rational exponents over the base dimensions:

    mass [kg], length [m], time [s], temperature [K], angle [rad], current [A]

Rules:
- `+`, `-` and ordering comparisons need equal dimensions; the right operand
  is converted into the left operand's unit.
- `*` and `/` add/subtract dimension exponents, `**` scales them.
- Plain numbers are dimensionless. The literal 0 compares with anything.
- Conversion with `.to()` only succeeds between equal dimensions.

Angles are a base dimension so that degrees convert to radians, but every
trigonometric/transcendental function accepts either a dimensionless ratio
or a plain angle.
"""

import math
import re
from dataclasses import dataclass
from fractions import Fraction
from functools import lru_cache
from typing import Dict, Tuple, Union

import numpy as np

from spacefaring.errors import DimensionMismatch, DomainError, UnitParseError


BASE_DIMENSIONS = ("mass", "length", "time", "temperature", "angle", "current")
BASE_SYMBOLS = ("kg", "m", "s", "K", "rad", "A")


def _as_fraction(power) -> Fraction:
    """Exponent as an exact fraction (floats like 0.25 or 1/3 included)."""
    if isinstance(power, (int, Fraction)):
        return Fraction(power)
    return Fraction(float(power)).limit_denominator(1000)


def _scale_power(power):
    """Exponent usable for float/ndarray arithmetic."""
    if isinstance(power, int):
        return power
    return float(power)


@dataclass(frozen=True)
class Dimension:
    """Exponent vector over BASE_DIMENSIONS."""

    exponents: Tuple[Fraction, ...] = (Fraction(0),) * len(BASE_DIMENSIONS)

    @classmethod
    def of(cls, **powers) -> 'Dimension':
        """Build a dimension from keyword exponents, e.g. Dimension.of(length=1, time=-1)."""
        unknown = set(powers) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown base dimension(s): {sorted(unknown)}")
        return cls(tuple(_as_fraction(powers.get(name, 0)) for name in BASE_DIMENSIONS))

    def __mul__(self, other: 'Dimension') -> 'Dimension':
        return Dimension(tuple(a + b for a, b in zip(self.exponents, other.exponents)))

    def __truediv__(self, other: 'Dimension') -> 'Dimension':
        return Dimension(tuple(a - b for a, b in zip(self.exponents, other.exponents)))

    def __pow__(self, power) -> 'Dimension':
        p = _as_fraction(power)
        return Dimension(tuple(a * p for a in self.exponents))

    @property
    def is_dimensionless(self) -> bool:
        return all(a == 0 for a in self.exponents)

    @property
    def is_angle(self) -> bool:
        """True for a plain angle (rad^1, nothing else)."""
        return self == ANGLE

    def __str__(self):
        if self.is_dimensionless:
            return "1"
        parts = []
        for symbol, exponent in zip(BASE_SYMBOLS, self.exponents):
            if exponent == 0:
                continue
            parts.append(symbol if exponent == 1 else f"{symbol}^{exponent}")
        return " ".join(parts)


DIMENSIONLESS_DIM = Dimension()
MASS = Dimension.of(mass=1)
LENGTH = Dimension.of(length=1)
TIME = Dimension.of(time=1)
TEMPERATURE = Dimension.of(temperature=1)
ANGLE = Dimension.of(angle=1)
CURRENT = Dimension.of(current=1)


def _wrap(symbol: str) -> str:
    """Parenthesize a compound symbol before appending an exponent or divisor."""
    if any(ch in symbol for ch in " /^"):
        return f"({symbol})"
    return symbol


def _format_power(power) -> str:
    p = _as_fraction(power)
    return str(p.numerator) if p.denominator == 1 else f"({p})"


@dataclass(frozen=True)
class Unit:
    """
    A unit: display symbol, scale factor to SI and dimension.

    Compound units produced by arithmetic carry a descriptive symbol; it is
    for display only and is not guaranteed to re-parse.
    """

    symbol: str
    scale: float
    dimension: Dimension

    def __mul__(self, other: 'Unit') -> 'Unit':
        if not other.symbol:
            symbol = self.symbol
        elif not self.symbol:
            symbol = other.symbol
        else:
            symbol = f"{self.symbol} {other.symbol}"
        return Unit(symbol, self.scale * other.scale, self.dimension * other.dimension)

    def __truediv__(self, other: 'Unit') -> 'Unit':
        if not other.symbol:
            symbol = self.symbol
        elif not self.symbol:
            symbol = f"{_wrap(other.symbol)}^-1"
        else:
            symbol = f"{self.symbol}/{_wrap(other.symbol)}"
        return Unit(symbol, self.scale / other.scale, self.dimension / other.dimension)

    def __pow__(self, power) -> 'Unit':
        if power == 1:
            return self
        symbol = f"{_wrap(self.symbol)}^{_format_power(power)}" if self.symbol else ""
        return Unit(symbol, self.scale ** _scale_power(power), self.dimension ** power)

    def is_compatible(self, other: 'Unit') -> bool:
        return self.dimension == other.dimension

    def __str__(self):
        return self.symbol or "1"


DIMENSIONLESS = Unit("", 1.0, DIMENSIONLESS_DIM)
RADIAN = Unit("rad", 1.0, ANGLE)


# ==============================================================================
# UNIT REGISTRY
# ==============================================================================

# SI prefixes; "u" and "µ" are both micro
PREFIXES = {
    "p": 1e-12, "n": 1e-9, "u": 1e-6, "µ": 1e-6, "m": 1e-3, "c": 1e-2, "d": 1e-1,
    "k": 1e3, "M": 1e6, "G": 1e9, "T": 1e12, "P": 1e15, "E": 1e18,
}

_FORCE = Dimension.of(mass=1, length=1, time=-2)
_ENERGY = Dimension.of(mass=1, length=2, time=-2)
_POWER = Dimension.of(mass=1, length=2, time=-3)
_PRESSURE = Dimension.of(mass=1, length=-1, time=-2)
_MAGNETIC_FIELD = Dimension.of(mass=1, time=-2, current=-1)

_DAY = 86400.0
_C = 299792458.0
_AU = 1.495978707e11

# symbol -> (scale to SI, dimension, accepts SI prefix)
_REGISTRY: Dict[str, Tuple[float, Dimension, bool]] = {
    # SI base and derived
    "m": (1.0, LENGTH, True),
    "g": (1e-3, MASS, True),
    "s": (1.0, TIME, True),
    "K": (1.0, TEMPERATURE, True),
    "rad": (1.0, ANGLE, True),
    "A": (1.0, CURRENT, True),
    "N": (1.0, _FORCE, True),
    "J": (1.0, _ENERGY, True),
    "W": (1.0, _POWER, True),
    "Pa": (1.0, _PRESSURE, True),
    "T": (1.0, _MAGNETIC_FIELD, True),
    "Hz": (1.0, Dimension.of(time=-1), True),
    "sr": (1.0, ANGLE ** 2, False),
    # Accepted non-SI
    "t": (1e3, MASS, False),
    "L": (1e-3, LENGTH ** 3, True),
    "bar": (1e5, _PRESSURE, True),
    "eV": (1.602176634e-19, _ENERGY, True),
    "gauss": (1e-4, _MAGNETIC_FIELD, False),
    "min": (60.0, TIME, False),
    "h": (3600.0, TIME, False),
    "d": (_DAY, TIME, False),
    "yr": (365.25 * _DAY, TIME, True),  # Julian year
    "deg": (math.pi / 180.0, ANGLE, False),
    "°": (math.pi / 180.0, ANGLE, False),
    "arcmin": (math.pi / 10800.0, ANGLE, False),
    "arcsec": (math.pi / 648000.0, ANGLE, False),
    # Astronomical
    "AU": (_AU, LENGTH, False),
    "ly": (_C * 365.25 * _DAY, LENGTH, False),
    "pc": (_AU * 648000.0 / math.pi, LENGTH, True),
    "c": (_C, Dimension.of(length=1, time=-1), False),
    "g0": (9.80665, Dimension.of(length=1, time=-2), False),
    "Msun": (1.98847e30, MASS, False),
    "Mearth": (5.9722e24, MASS, False),
    "Mjup": (1.89813e27, MASS, False),
    "Rsun": (6.957e8, LENGTH, False),
    "Rearth": (6.3781e6, LENGTH, False),
    "Rjup": (7.1492e7, LENGTH, False),
    "Lsun": (3.828e26, _POWER, False),
}

_TERM = re.compile(
    r"^(?P<symbol>[^\s^*/()]+?)(?:\^(?P<power>[-+]?(?:\d+(?:\.\d*)?|\.\d+)))?$"
)


def _lookup(symbol: str) -> Unit:
    """Resolve a single symbol, trying exact match before prefix + symbol."""
    if symbol in _REGISTRY:
        scale, dimension, _ = _REGISTRY[symbol]
        return Unit(symbol, scale, dimension)

    for prefix, factor in PREFIXES.items():
        if not symbol.startswith(prefix):
            continue
        base = symbol[len(prefix):]
        if base in _REGISTRY and _REGISTRY[base][2]:
            scale, dimension, _ = _REGISTRY[base]
            return Unit(symbol, factor * scale, dimension)

    raise UnitParseError(f"Unknown unit symbol: {symbol!r}")


@lru_cache(maxsize=256)
def parse_unit(expression: str) -> Unit:
    """
    Parse a unit expression into a Unit.

    Grammar:
        - terms separated by whitespace or `*` multiply
        - `/` divides by the NEXT term only ("W/m^2/K^4" == "W m^-2 K^-4")
        - `^` gives an integer or decimal exponent ("m^3", "s^-2", "m^0.5")
        - the literal "1" is a dimensionless placeholder ("1/s")

    Args:
        expression: Unit expression, e.g. "kg m^2 s^-2", "g/cm^3"

    Returns:
        Unit with symbol equal to the stripped expression

    Raises:
        UnitParseError: Unknown symbol or malformed expression
    """
    text = expression.strip()
    if not text:
        return DIMENSIONLESS

    tokens = re.sub(r"\s*([*/])\s*", r" \1 ", text).split()
    result = DIMENSIONLESS
    invert_next = False

    for token in tokens:
        if token == "*":
            continue
        if token == "/":
            if invert_next:
                raise UnitParseError(f"Malformed unit expression: {expression!r}")
            invert_next = True
            continue

        match = _TERM.match(token)
        if match is None:
            raise UnitParseError(f"Malformed unit term {token!r} in {expression!r}")

        if match.group("symbol") == "1":
            unit = DIMENSIONLESS
        else:
            unit = _lookup(match.group("symbol"))

        power = match.group("power")
        if power is not None:
            unit = unit ** Fraction(power)

        result = result / unit if invert_next else result * unit
        invert_next = False

    if invert_next:
        raise UnitParseError(f"Dangling '/' in unit expression: {expression!r}")

    return Unit(text, result.scale, result.dimension)


def _as_unit(unit: Union[str, Unit]) -> Unit:
    if isinstance(unit, Unit):
        return unit
    return parse_unit(unit)


def si_unit(dimension: Dimension) -> Unit:
    """Coherent SI unit (scale 1) for a dimension, named by its base symbols."""
    symbol = "" if dimension.is_dimensionless else str(dimension)
    return Unit(symbol, 1.0, dimension)


# ==============================================================================
# QUANTITY
# ==============================================================================


def _freeze(value):
    """Copy array input into a read-only array; scalars pass through."""
    if isinstance(value, (list, tuple, np.ndarray)):
        array = np.array(value, dtype=np.result_type(np.asarray(value), np.float64))
        array.setflags(write=False)
        return array
    return value


class Quantity:
    """
    Immutable numeric value tagged with a unit.

    Args:
        value: float, int, numpy scalar (e.g. np.longdouble) or array-like
        unit: Unit instance or unit expression (default: dimensionless)

    Example:
        >>> g = Quantity(9.81, "m/s^2")
        >>> (g * Quantity(2.0, "s")).to("m/s")
        Quantity(19.62, 'm/s')
    """

    __slots__ = ("value", "unit")

    # Keep numpy from broadcasting over Quantity operands; it defers to our
    # reflected operators instead.
    __array_ufunc__ = None

    def __init__(self, value, unit: Union[str, Unit] = DIMENSIONLESS):
        unit = _as_unit(unit)
        if isinstance(value, Quantity):
            value = value.to(unit).value
        object.__setattr__(self, "value", _freeze(value))
        object.__setattr__(self, "unit", unit)

    def __setattr__(self, name, value):
        raise AttributeError("Quantity is immutable")

    def __delattr__(self, name):
        raise AttributeError("Quantity is immutable")

    def __reduce__(self):
        return (Quantity, (self.value, self.unit))

    # --------------------------------------------------------------------------
    # Units and conversion
    # --------------------------------------------------------------------------

    @property
    def dimension(self) -> Dimension:
        return self.unit.dimension

    @property
    def is_dimensionless(self) -> bool:
        return self.unit.dimension.is_dimensionless

    def to(self, unit: Union[str, Unit]) -> 'Quantity':
        """
        Convert to another unit of the same dimension.

        Raises:
            DimensionMismatch: If `unit` measures a different dimension
        """
        target = _as_unit(unit)
        if target.dimension != self.unit.dimension:
            raise DimensionMismatch(
                f"Cannot convert {self.unit} [{self.unit.dimension}] "
                f"to {target} [{target.dimension}]"
            )
        if target.scale == self.unit.scale:
            return Quantity(self.value, target)
        return Quantity(self.value * (self.unit.scale / target.scale), target)

    @property
    def si(self) -> 'Quantity':
        """This quantity in coherent SI base units."""
        return Quantity(self.value * self.unit.scale, si_unit(self.unit.dimension))

    def magnitude(self, unit: Union[str, Unit, None] = None):
        """Bare number in `unit` (or in the current unit if omitted)."""
        if unit is None:
            return self.value
        return self.to(unit).value

    def __float__(self):
        dimension = self.unit.dimension
        if not (dimension.is_dimensionless or dimension.is_angle):
            raise DimensionMismatch(f"Cannot convert a quantity of dimension [{dimension}] to float")
        return float(self.value * self.unit.scale)

    # --------------------------------------------------------------------------
    # Arithmetic
    # --------------------------------------------------------------------------

    @staticmethod
    def _coerce(other):
        if isinstance(other, Quantity):
            return other
        if isinstance(other, (int, float, np.number, np.ndarray, list, tuple)):
            return Quantity(other)
        return None

    def _aligned(self, other: 'Quantity', operation: str):
        """Value of `other` expressed in this quantity's unit."""
        if other.unit.dimension != self.unit.dimension:
            raise DimensionMismatch(
                f"Cannot {operation} [{self.unit.dimension}] and [{other.unit.dimension}]"
            )
        if other.unit.scale == self.unit.scale:
            return other.value
        return other.value * (other.unit.scale / self.unit.scale)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Quantity(self.value + self._aligned(other, "add"), self.unit)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__add__(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Quantity(self.value - self._aligned(other, "subtract"), self.unit)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self.value * other.value, self.unit * other.unit)
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Quantity(self.value * other.value, self.unit)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(self.value / other.value, self.unit / other.unit)
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Quantity(self.value / other.value, self.unit)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Quantity(other.value / self.value, self.unit ** -1)

    def __pow__(self, power):
        if isinstance(power, Quantity):
            power = float(power)
        return Quantity(self.value ** _scale_power(power), self.unit ** power)

    def __neg__(self):
        return Quantity(-self.value, self.unit)

    def __pos__(self):
        return self

    def __abs__(self):
        return Quantity(abs(self.value), self.unit)

    # --------------------------------------------------------------------------
    # Comparison
    # --------------------------------------------------------------------------

    def _compare(self, other, op):
        if not isinstance(other, Quantity):
            if isinstance(other, (int, float, np.number)) and other == 0:
                return op(self.value, 0)
            other = self._coerce(other)
            if other is None:
                return NotImplemented
        return op(self.value, self._aligned(other, "compare"))

    def __lt__(self, other):
        return self._compare(other, lambda a, b: a < b)

    def __le__(self, other):
        return self._compare(other, lambda a, b: a <= b)

    def __gt__(self, other):
        return self._compare(other, lambda a, b: a > b)

    def __ge__(self, other):
        return self._compare(other, lambda a, b: a >= b)

    def __eq__(self, other):
        # Equality across dimensions is False, not an error
        if isinstance(other, Quantity) and other.unit.dimension != self.unit.dimension:
            return False
        if not isinstance(other, (Quantity, int, float, np.number)):
            return NotImplemented
        if not isinstance(other, Quantity) and other != 0 and not self.is_dimensionless:
            return False
        return self._compare(other, lambda a, b: a == b)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return np.logical_not(result) if isinstance(result, np.ndarray) else not result

    def __hash__(self):
        # Equal quantities may differ by rounding once rescaled, so only the
        # dimension is hashed
        return hash(self.unit.dimension)

    # --------------------------------------------------------------------------
    # Containers and display
    # --------------------------------------------------------------------------

    def __bool__(self):
        return bool(self.value)

    def __len__(self):
        return len(self.value)

    def __getitem__(self, index):
        return Quantity(self.value[index], self.unit)

    def __iter__(self):
        for item in self.value:
            yield Quantity(item, self.unit)

    def __repr__(self):
        return f"Quantity({self.value!r}, {self.unit.symbol!r})"

    def __str__(self):
        return f"{self.value} {self.unit}".rstrip()

    def __format__(self, spec):
        return f"{format(self.value, spec)} {self.unit}".rstrip()


def parse_quantity(text: str) -> Quantity:
    """
    Parse "<number> <unit expression>" into a Quantity.

    Args:
        text: e.g. "7.342e22 kg", "1737.4 km", "0.0549" (dimensionless)

    Raises:
        UnitParseError: If the number or unit cannot be parsed
    """
    parts = str(text).strip().split(None, 1)
    if not parts:
        raise UnitParseError("Empty quantity string")
    try:
        value = float(parts[0])
    except ValueError:
        raise UnitParseError(f"Invalid numeric value in quantity: {text!r}") from None
    unit = parse_unit(parts[1]) if len(parts) > 1 else DIMENSIONLESS
    return Quantity(value, unit)


# ==============================================================================
# DIMENSION-CHECKED MATH
# ==============================================================================


def _ratio(x, name: str):
    """Plain value of a dimensionless or angle argument (angles in radians)."""
    if isinstance(x, Quantity):
        dimension = x.unit.dimension
        if not (dimension.is_dimensionless or dimension.is_angle):
            raise DimensionMismatch(
                f"{name}() requires a dimensionless or angle argument, got [{dimension}]"
            )
        if x.unit.scale == 1.0:
            return x.value
        return x.value * x.unit.scale
    return x


def sqrt(x):
    """Square root; dimension exponents are halved."""
    value = x.value if isinstance(x, Quantity) else x
    if np.any(np.asarray(value) < 0):
        raise DomainError("sqrt() of a negative value")
    if isinstance(x, Quantity):
        return Quantity(np.sqrt(value), x.unit ** Fraction(1, 2))
    return np.sqrt(value)


def cbrt(x):
    """Real cube root; dimension exponents are divided by three."""
    if isinstance(x, Quantity):
        return Quantity(np.cbrt(x.value), x.unit ** Fraction(1, 3))
    return np.cbrt(x)


def sin(x):
    return np.sin(_ratio(x, "sin"))


def cos(x):
    return np.cos(_ratio(x, "cos"))


def tan(x):
    return np.tan(_ratio(x, "tan"))


def atan(x) -> Quantity:
    """Arc tangent of a ratio, as an angle in radians."""
    return Quantity(np.arctan(_ratio(x, "atan")), RADIAN)


def atan2(y, x) -> Quantity:
    """
    Angle of the point (x, y), in radians.

    Both arguments must share a dimension (any dimension); plain numbers
    are treated as dimensionless.
    """
    if isinstance(y, Quantity) or isinstance(x, Quantity):
        y = y if isinstance(y, Quantity) else Quantity(y)
        x = x if isinstance(x, Quantity) else Quantity(x)
        x_value = y._aligned(x, "take atan2 of")
        return Quantity(np.arctan2(y.value, x_value), RADIAN)
    return Quantity(np.arctan2(y, x), RADIAN)


def cosh(x):
    return np.cosh(_ratio(x, "cosh"))


def tanh(x):
    return np.tanh(_ratio(x, "tanh"))


def exp(x):
    return np.exp(_ratio(x, "exp"))


def acosh(x):
    """Inverse hyperbolic cosine; requires x >= 1."""
    value = _ratio(x, "acosh")
    if np.any(np.asarray(value) < 1):
        raise DomainError("acosh() argument must be >= 1")
    return np.arccosh(value)


def acosh1p(x):
    """
    acosh(1 + x) for x >= 0, without cancellation for small x.

    Evaluated as log1p(x + sqrt(x(x + 2))).
    """
    value = _ratio(x, "acosh1p")
    if np.any(np.asarray(value) < 0):
        raise DomainError("acosh1p() argument must be >= 0")
    return np.log1p(value + np.sqrt(value * (value + 2)))


def log(x):
    """Natural logarithm; requires x > 0."""
    value = _ratio(x, "log")
    if np.any(np.asarray(value) <= 0):
        raise DomainError("log() argument must be positive")
    return np.log(value)
