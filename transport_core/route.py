# MIT License
"""Illustrative route geometry for the map view.

Not a routing engine: the path only reflects whether the terminal and
customer legs exist, not how long they are.  Randomness comes from an
injectable :class:`numpy.random.Generator` so that tests can pin the
coordinates with a seed.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .params import GeoPoint, RouteParams, ScenarioInput


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a generator; ``None`` seeds from OS entropy."""
    return np.random.default_rng(seed)


def _jitter(point: GeoPoint, width_deg: float, rng: np.random.Generator) -> GeoPoint:
    # uniform in [-width/2, +width/2) on both axes
    dlat, dlon = (rng.random(2) - 0.5) * width_deg
    return (float(point[0] + dlat), float(point[1] + dlon))


def synthesize_route(
    inp: ScenarioInput,
    params: Optional[RouteParams] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[GeoPoint, ...]:
    """Build a 2 or 3 point path: origin, optional terminal, destination.

    Parameters
    ----------
    inp:
        Scenario whose distances decide which legs are drawn.
    params:
        Anchor coordinates and jitter widths.
    rng:
        Random source for the jitter.  A fresh unseeded generator is
        used when omitted.

    Returns
    -------
    tuple of (lat, lon)
        The route in travel order.
    """
    params = params or RouteParams()
    rng = rng if rng is not None else make_rng()
    route: List[GeoPoint] = [tuple(params.origin)]
    if inp.distance_to_terminal > 0:
        route.append(_jitter(params.origin, params.terminal_jitter_deg, rng))
    if inp.distance_to_customer > 0:
        route.append(_jitter(params.destination, params.customer_jitter_deg, rng))
    else:
        route.append(tuple(params.destination))
    return tuple(route)
