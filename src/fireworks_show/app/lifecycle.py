"""Starting and stopping fireworks displays."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

from fireworks_show.engine import PathLibrary

from .options import FireworksOptions
from .show import FireworksShow

if TYPE_CHECKING:
    from fireworks_show.renderer.surface import Surface


def start(
    surface: Surface,
    options: Union[FireworksOptions, Mapping[str, Any], None] = None,
    *,
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], float]] = None,
    path_library: Optional[PathLibrary] = None,
) -> FireworksShow:
    """Start showing fireworks on a surface.

    The returned show is the handle for the display: drive it with
    ``tick()`` (or ``run_async()``) and pass it to :func:`stop`.

    Args:
        surface: Surface to draw on. Its size is fixed for the show.
        options: Options, as :class:`FireworksOptions` or a plain mapping.
        rng: Random source. Seed it for reproducible shows.
        clock: Function returning the current time in seconds.
        path_library: Library that resolves the custom path reference.

    Returns:
        The running show.

    Raises:
        ValueError: If the options are invalid.
    """
    if not isinstance(options, FireworksOptions):
        options = FireworksOptions.from_dict(options)

    show = FireworksShow(surface, options, rng=rng, clock=clock, path_library=path_library)
    surface.clear()
    show.start()
    return show


def stop(show: FireworksShow) -> None:
    """Stop showing fireworks.

    Args:
        show: The show returned by :func:`start`.
    """
    show.stop()
    show.box.clear()
