"""
Axis-aligned bounding boxes.

Contains:
- EnvelopeBase, the read-only predicates shared by every bounding box kind
- Envelope, a mutable bounding box storing its four bound values

The null (empty) envelope is represented by max_x < min_x. Covers and
contains are boundary inclusive; they are not the strict-interior OGC
"contains".
"""

import functools
import math
from numbers import Real
from typing import Optional

from .coordinate import Coordinate


def _box_args(args, allow_segment: bool):
    """
    Normalise the overloaded predicate arguments to (min_x, max_x, min_y, max_y).

    Returns None when the argument is a null envelope.
    """
    if len(args) == 1:
        other = args[0]
        if isinstance(other, EnvelopeBase):
            if other.is_null():
                return None
            return other.min_x, other.max_x, other.min_y, other.max_y
        if isinstance(other, Coordinate):
            return other.x, other.x, other.y, other.y
    elif len(args) == 2:
        a, b = args
        if isinstance(a, Coordinate) and isinstance(b, Coordinate) and allow_segment:
            min_x = a.x if a.x < b.x else b.x
            max_x = a.x if a.x > b.x else b.x
            min_y = a.y if a.y < b.y else b.y
            max_y = a.y if a.y > b.y else b.y
            return min_x, max_x, min_y, max_y
        if isinstance(a, Real) and isinstance(b, Real):
            return a, a, b, b
    raise TypeError(f"Unsupported arguments: {args!r}")


@functools.total_ordering
class EnvelopeBase:
    """
    Read-only bounding box behaviour.

    Subclasses provide ``is_null()`` and the ``min_x``, ``max_x``, ``min_y``,
    ``max_y`` properties; every predicate here is expressed through them, so
    an Envelope and an IndexedEnvelope can be compared or intersected with
    one another.
    """

    __slots__ = ()

    @staticmethod
    def point_in_segment_envelope(p1: Coordinate, p2: Coordinate,
                                  q: Coordinate) -> bool:
        """
        Test whether q lies in the envelope defined by the segment p1-p2.

        Uses direct comparisons rather than ``min``/``max`` calls.
        """
        return ((q.x >= (p1.x if p1.x < p2.x else p2.x)) and
                (q.x <= (p1.x if p1.x > p2.x else p2.x)) and
                (q.y >= (p1.y if p1.y < p2.y else p2.y)) and
                (q.y <= (p1.y if p1.y > p2.y else p2.y)))

    @staticmethod
    def segment_envelopes_intersect(p1: Coordinate, p2: Coordinate,
                                    q1: Coordinate, q2: Coordinate) -> bool:
        """Test whether the envelopes of segments p1-p2 and q1-q2 intersect."""
        minq = q1.x if q1.x < q2.x else q2.x
        maxq = q1.x if q1.x > q2.x else q2.x
        minp = p1.x if p1.x < p2.x else p2.x
        maxp = p1.x if p1.x > p2.x else p2.x
        if minp > maxq:
            return False
        if maxp < minq:
            return False

        minq = q1.y if q1.y < q2.y else q2.y
        maxq = q1.y if q1.y > q2.y else q2.y
        minp = p1.y if p1.y < p2.y else p2.y
        maxp = p1.y if p1.y > p2.y else p2.y
        if minp > maxq:
            return False
        if maxp < minq:
            return False
        return True

    def is_null(self) -> bool:
        raise NotImplementedError

    @property
    def min_x(self) -> float:
        raise NotImplementedError

    @property
    def max_x(self) -> float:
        raise NotImplementedError

    @property
    def min_y(self) -> float:
        raise NotImplementedError

    @property
    def max_y(self) -> float:
        raise NotImplementedError

    @property
    def width(self) -> float:
        if self.is_null():
            return 0.0
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        if self.is_null():
            return 0.0
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def diameter(self) -> float:
        """Length of the diagonal, 0 for the null envelope."""
        if self.is_null():
            return 0.0
        return math.hypot(self.width, self.height)

    @property
    def min_extent(self) -> float:
        if self.is_null():
            return 0.0
        w = self.width
        h = self.height
        return w if w < h else h

    @property
    def max_extent(self) -> float:
        if self.is_null():
            return 0.0
        w = self.width
        h = self.height
        return w if w > h else h

    def centre(self) -> Optional[Coordinate]:
        if self.is_null():
            return None
        return Coordinate((self.min_x + self.max_x) / 2.0,
                          (self.min_y + self.max_y) / 2.0)

    def intersection(self, other: "EnvelopeBase") -> "Envelope":
        """
        Compute the overlap of two envelopes.

        Parameters
        ----------
        other : EnvelopeBase
            The envelope to intersect with.

        Returns
        -------
        Envelope
            A new envelope; null if either input is null or they are disjoint.
        """
        if self.is_null() or other.is_null() or not self.intersects(other):
            return Envelope()
        x1 = self.min_x if self.min_x > other.min_x else other.min_x
        y1 = self.min_y if self.min_y > other.min_y else other.min_y
        x2 = self.max_x if self.max_x < other.max_x else other.max_x
        y2 = self.max_y if self.max_y < other.max_y else other.max_y
        return Envelope(x1, x2, y1, y2)

    def intersects(self, *args) -> bool:
        """
        Test whether this envelope and the argument share at least one point.

        Accepts another envelope, a Coordinate, an ``(x, y)`` pair of numbers,
        or two Coordinates defining a segment's bounding box.
        """
        if self.is_null():
            return False
        box = _box_args(args, allow_segment=True)
        if box is None:
            return False
        min_x, max_x, min_y, max_y = box
        return not (min_x > self.max_x or
                    max_x < self.min_x or
                    min_y > self.max_y or
                    max_y < self.min_y)

    def overlaps(self, *args) -> bool:
        return self.intersects(*args)

    def disjoint(self, other: "EnvelopeBase") -> bool:
        return not self.intersects(other)

    def covers(self, *args) -> bool:
        """
        Test whether the argument lies entirely inside this envelope.

        The boundary counts as inside. Accepts another envelope, a Coordinate
        or an ``(x, y)`` pair. Returns False if either side is null.
        """
        if self.is_null():
            return False
        box = _box_args(args, allow_segment=False)
        if box is None:
            return False
        min_x, max_x, min_y, max_y = box
        return (min_x >= self.min_x and
                max_x <= self.max_x and
                min_y >= self.min_y and
                max_y <= self.max_y)

    def contains(self, *args) -> bool:
        """Boundary-inclusive containment; identical to ``covers``."""
        return self.covers(*args)

    def contains_properly(self, other: "EnvelopeBase") -> bool:
        if self == other:
            return False
        return self.covers(other)

    def distance(self, other: "EnvelopeBase") -> float:
        """
        Euclidean distance between the closest edges or corners.

        Returns 0 if the envelopes intersect and ``math.inf`` if either one is
        null. When one axis already overlaps, the gap along the other axis is
        returned directly.
        """
        if self.intersects(other):
            return 0.0
        if self.is_null() or other.is_null():
            return math.inf

        dx = 0.0
        if self.max_x < other.min_x:
            dx = other.min_x - self.max_x
        elif self.min_x > other.max_x:
            dx = self.min_x - other.max_x

        dy = 0.0
        if self.max_y < other.min_y:
            dy = other.min_y - self.max_y
        elif self.min_y > other.max_y:
            dy = self.min_y - other.max_y

        if dx == 0.0:
            return dy
        if dy == 0.0:
            return dx
        return math.hypot(dx, dy)

    def compare_to(self, other: "EnvelopeBase") -> int:
        """
        Lexicographic ordering on (min_x, min_y, max_x, max_y).

        A null envelope sorts before every non-null envelope.

        Returns
        -------
        int
            -1, 0 or 1.
        """
        if self.is_null():
            return 0 if other.is_null() else -1
        if other.is_null():
            return 1

        for mine, theirs in ((self.min_x, other.min_x),
                             (self.min_y, other.min_y),
                             (self.max_x, other.max_x),
                             (self.max_y, other.max_y)):
            if mine < theirs:
                return -1
            if mine > theirs:
                return 1
        return 0

    def to_envelope(self) -> "Envelope":
        """Snapshot the current bounds into a standalone Envelope."""
        return Envelope(self)

    def __eq__(self, other):
        if not isinstance(other, EnvelopeBase):
            return NotImplemented
        if self.is_null():
            return other.is_null()
        if other.is_null():
            return False
        return (self.max_x == other.max_x and
                self.max_y == other.max_y and
                self.min_x == other.min_x and
                self.min_y == other.min_y)

    def __lt__(self, other):
        if not isinstance(other, EnvelopeBase):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self):
        if self.is_null():
            return hash(None)
        return hash((self.min_x, self.min_y, self.max_x, self.max_y))

    def __repr__(self):
        return f"Env[{self.min_x} : {self.max_x}, {self.min_y} : {self.max_y}]"


class Envelope(EnvelopeBase):
    """
    A mutable axis-aligned bounding box.

    Constructed as ``Envelope()`` (null), ``Envelope(x1, x2, y1, y2)``,
    ``Envelope(p)``, ``Envelope(p1, p2)`` or ``Envelope(other_envelope)``.
    The bounds are reordered so that min <= max along each axis.
    """

    __slots__ = ('_min_x', '_max_x', '_min_y', '_max_y')

    def __init__(self, *args):
        self.init(*args)

    def init(self, *args) -> None:
        """Re-initialise in place; accepts the same forms as the constructor."""
        if not args:
            self.set_to_null()
        elif len(args) == 4:
            self._init_bounds(*args)
        elif len(args) == 1 and isinstance(args[0], EnvelopeBase):
            other = args[0]
            if other.is_null():
                self.set_to_null()
            else:
                self._min_x = other.min_x
                self._max_x = other.max_x
                self._min_y = other.min_y
                self._max_y = other.max_y
        elif len(args) == 1 and isinstance(args[0], Coordinate):
            p = args[0]
            self._init_bounds(p.x, p.x, p.y, p.y)
        elif (len(args) == 2 and isinstance(args[0], Coordinate)
              and isinstance(args[1], Coordinate)):
            p1, p2 = args
            self._init_bounds(p1.x, p2.x, p1.y, p2.y)
        else:
            raise TypeError(f"Cannot build an Envelope from {args!r}")

    def _init_bounds(self, x1, x2, y1, y2) -> None:
        x1 = float(x1)
        x2 = float(x2)
        y1 = float(y1)
        y2 = float(y2)
        if x1 < x2:
            self._min_x, self._max_x = x1, x2
        else:
            self._min_x, self._max_x = x2, x1
        if y1 < y2:
            self._min_y, self._max_y = y1, y2
        else:
            self._min_y, self._max_y = y2, y1

    def set_to_null(self) -> None:
        self._min_x = 0.0
        self._max_x = -1.0
        self._min_y = 0.0
        self._max_y = -1.0

    def is_null(self) -> bool:
        return self._max_x < self._min_x

    def copy(self) -> "Envelope":
        return Envelope(self)

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    def expand_to_include(self, *args) -> None:
        """
        Enlarge this envelope to include a point or another envelope.

        Accepts a Coordinate, an ``(x, y)`` pair or an envelope. A null
        envelope becomes the singleton box of the point; expanding by a null
        envelope has no effect.
        """
        if len(args) == 2:
            self._expand_xy(args[0], args[1])
            return
        if len(args) != 1:
            raise TypeError(f"Unsupported arguments: {args!r}")

        other = args[0]
        if isinstance(other, Coordinate):
            self._expand_xy(other.x, other.y)
            return
        if not isinstance(other, EnvelopeBase):
            raise TypeError(f"Unsupported arguments: {args!r}")
        if other.is_null():
            return
        if self.is_null():
            self.init(other)
            return
        if other.min_x < self._min_x:
            self._min_x = other.min_x
        if other.max_x > self._max_x:
            self._max_x = other.max_x
        if other.min_y < self._min_y:
            self._min_y = other.min_y
        if other.max_y > self._max_y:
            self._max_y = other.max_y

    def _expand_xy(self, x: float, y: float) -> None:
        if self.is_null():
            self._min_x = self._max_x = float(x)
            self._min_y = self._max_y = float(y)
            return
        if x < self._min_x:
            self._min_x = float(x)
        if x > self._max_x:
            self._max_x = float(x)
        if y < self._min_y:
            self._min_y = float(y)
        if y > self._max_y:
            self._max_y = float(y)

    def expand_by(self, delta_x: float, delta_y: Optional[float] = None) -> None:
        """
        Grow (or shrink, for negative deltas) the envelope on every side.

        Parameters
        ----------
        delta_x : float
            Distance to move the x bounds outward.
        delta_y : float, optional
            Distance to move the y bounds outward. Defaults to ``delta_x``.

        Notes
        -----
        A null envelope is left unchanged. If shrinking inverts either axis
        the envelope becomes null.
        """
        if delta_y is None:
            delta_y = delta_x
        if self.is_null():
            return
        self._min_x -= delta_x
        self._max_x += delta_x
        self._min_y -= delta_y
        self._max_y += delta_y
        if self._min_x > self._max_x or self._min_y > self._max_y:
            self.set_to_null()

    def translate(self, trans_x: float, trans_y: float) -> None:
        if self.is_null():
            return
        self._init_bounds(self._min_x + trans_x, self._max_x + trans_x,
                          self._min_y + trans_y, self._max_y + trans_y)
