"""
Image carousel

This module handles:
1. Glide.js options for the looping, auto-advancing, responsive slideshow
2. GlideEngine: one slideshow instance bound to one container and image list
3. ImageCarousel: owns at most one engine and rebuilds it when the image list
   changes, always tearing the old one down first

ImageCarousel.close() (or leaving its `with` block) tears the engine down
exactly once.
"""

import html
import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Sequence, Tuple

from config import (
    CAROUSEL_AUTOPLAY_MS,
    CAROUSEL_BREAKPOINTS,
    CAROUSEL_FOCUS_AT,
    CAROUSEL_PER_VIEW,
    CAROUSEL_TYPE,
    GLIDE_CSS_URL,
    GLIDE_JS_URL,
)

logger = logging.getLogger(__name__)


class CarouselError(Exception):
    """A carousel engine was used outside its mount/destroy lifecycle."""


@dataclass(frozen=True)
class CarouselConfig:
    type: str = CAROUSEL_TYPE
    per_view: int = CAROUSEL_PER_VIEW
    focus_at: str = CAROUSEL_FOCUS_AT
    autoplay: int = CAROUSEL_AUTOPLAY_MS
    breakpoints: Dict[int, int] = field(default_factory=lambda: dict(CAROUSEL_BREAKPOINTS))

    def per_view_for_width(self, width: int) -> int:
        """Slides per view at a viewport `width`, following Glide's breakpoint rule."""
        for max_width in sorted(self.breakpoints):
            if width <= max_width:
                return self.breakpoints[max_width]
        return self.per_view

    def to_glide_options(self) -> dict:
        return {
            "type": self.type,
            "perView": self.per_view,
            "focusAt": self.focus_at,
            "autoplay": self.autoplay,
            "breakpoints": {
                str(max_width): {"perView": per_view}
                for max_width, per_view in sorted(self.breakpoints.items(), reverse=True)
            },
        }


class GlideEngine:
    """A single Glide.js slideshow over `images` inside the element `container`."""

    def __init__(self, container: str, images: Sequence[str], config: CarouselConfig):
        self.container = container
        self.images = tuple(images)
        self.config = config
        self.mounted = False
        self.destroyed = False

    def mount(self) -> str:
        if self.mounted or self.destroyed:
            raise CarouselError(f"Glide instance for #{self.container} cannot be mounted again")
        self.mounted = True
        return self.render()

    def destroy(self) -> None:
        if not self.mounted or self.destroyed:
            raise CarouselError(f"Glide instance for #{self.container} is not mounted")
        self.destroyed = True

    def render(self) -> str:
        slides = "\n".join(
            f'          <li class="glide__slide"><img src="{html.escape(url, quote=True)}" '
            f'alt="Dog {index}"></li>'
            for index, url in enumerate(self.images, start=1)
        )
        container_id = html.escape(self.container, quote=True)
        options = json.dumps(self.config.to_glide_options())
        return f"""
<link rel="stylesheet" href="{GLIDE_CSS_URL}">
<style>
  .carouselContainer {{ width: 100%; }}
  .glide__slide img {{ width: 100%; height: 300px; object-fit: cover; border-radius: 10px; }}
</style>
<div class="carouselContainer glide" id="{container_id}">
  <div class="carouselSelShadowContainer">
    <div class="glide__track" data-glide-el="track">
      <ul class="glide__slides">
{slides}
      </ul>
    </div>
  </div>
</div>
<script src="{GLIDE_JS_URL}"></script>
<script>
  new Glide({json.dumps("#" + self.container)}, {options}).mount();
</script>
"""


EngineFactory = Callable[[str, Tuple[str, ...], CarouselConfig], GlideEngine]


class ImageCarousel:
    """
    Owns the slideshow engine for the gallery's image list.

    States: no engine (uninitialized) or one mounted engine. The engine is
    rebuilt whenever the image list changes; the previous one is destroyed
    first and errors while destroying are logged, not raised.
    """

    def __init__(
        self,
        container: Optional[str] = "dog-carousel",
        config: Optional[CarouselConfig] = None,
        engine_factory: EngineFactory = GlideEngine,
    ):
        self.container = container
        self.config = config or CarouselConfig()
        self.engine_factory = engine_factory
        self.images: Tuple[str, ...] = ()
        self.markup: Optional[str] = None
        self._engine = None
        self._closed = False

    @property
    def mounted(self) -> bool:
        return self._engine is not None

    def attach(self, container: str) -> None:
        """Give the carousel a container and mount it if there are images waiting."""
        if self._closed:
            raise CarouselError("Carousel has been closed")
        self.container = container
        self._rebuild()

    def sync(self, images: Sequence[str]) -> None:
        """Follow the current image list; rebuild the engine only when it changed."""
        if self._closed:
            raise CarouselError("Carousel has been closed")
        images = tuple(images)
        if images == self.images and (self.mounted or not images):
            return
        self.images = images
        self._rebuild()

    def close(self) -> None:
        """Tear down the engine. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._teardown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def _rebuild(self) -> None:
        self._teardown()
        if not self.images or not self.container:
            return
        engine = self.engine_factory(self.container, self.images, self.config)
        self.markup = engine.mount()
        self._engine = engine
        logger.debug("Mounted carousel with %d slides", len(self.images))

    def _teardown(self) -> None:
        engine, self._engine = self._engine, None
        self.markup = None
        if engine is None:
            return
        try:
            engine.destroy()
        except Exception as e:
            logger.warning("Error while destroying carousel instance: %s", e)
