"""Terminal time chart rendering.

Braille dot canvas, pure layout helpers, the stateless renderer and the
character grid surfaces it draws on. The renderer depends only on the
``CharGridSurface`` protocol, so any terminal toolkit can host it.
"""

from .types import Attribute, CharGridSurface, ChartRenderResult  # noqa: F401
from .braille_canvas import BrailleCanvas  # noqa: F401
from .layout import ChartLayoutConfig  # noqa: F401
from .palette import ChartPalette, default_palette  # noqa: F401
from .renderer import TimeChartRenderer, render_time_chart  # noqa: F401
from .surfaces import GridSurface, print_surface  # noqa: F401
