# Re-export output helpers for convenience
from .table import TableConfig, format_table, metrics_rows
from .vectorizer import shape_to_shapely, draw_shape_on_axis, save_shape_as_png, save_shape_as_svg
from .renderer import GalleryConfig, render_shape_gallery, render_metrics_chart
