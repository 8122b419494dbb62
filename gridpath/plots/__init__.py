from .plotting import bar_compare, plot_search
