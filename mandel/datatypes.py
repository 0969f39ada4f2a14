from dataclasses import dataclass, field


@dataclass(frozen=True)
class View:
    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self):
        if not self.right > self.left:
            raise ValueError(f"View needs right > left, got left={self.left}, right={self.right}")
        if not self.top > self.bottom:
            raise ValueError(f"View needs top > bottom, got top={self.top}, bottom={self.bottom}")

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.top - self.bottom

    @property
    def aspect(self):
        return self.height / self.width

    def zoom(self, cx, cy):
        """Return a view centered at (cx, cy) with half the extent."""
        half_width = self.width / 4.0
        half_height = self.height / 4.0
        return View(
            left=cx - half_width,
            right=cx + half_width,
            top=cy + half_height,
            bottom=cy - half_height,
        )


@dataclass
class RenderSettings:
    view: View = field(default_factory=lambda: View(-2.5, 1.0, 1.5, -1.5))
    width: int = 1200
    height: int | None = None  # derived from the view aspect when unset
    max_iterations: int = 256
    workers: int | None = None  # host parallelism when unset
    colormap: str = "gray"
    gamma: float = 0.5

    def raster_height(self):
        if self.height is not None:
            return self.height
        return max(1, int(self.width * self.view.aspect))
