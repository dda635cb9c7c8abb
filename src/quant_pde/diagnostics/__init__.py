"""Tables and plots describing axes and their refinements.

Requires the optional ``diagnostics`` extra (pandas, matplotlib).
"""

from .axis_plots import plot_axis_spacing
from .axis_tables import refinement_table, spacing_frame

__all__ = ["refinement_table", "spacing_frame", "plot_axis_spacing"]
