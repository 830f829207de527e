"""Public exports for plotting helpers."""

from plotting.standard_plots import plot_component_traces, plot_thermal

__all__ = [
    "plot_component_traces",
    "plot_thermal",
]
