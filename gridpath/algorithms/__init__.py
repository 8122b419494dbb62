from .astar import a_star_search, a_star_steps
from .bfs import breadth_first_search, bfs_steps
from .dfs import depth_first_search, dfs_steps
from .dijkstra import dijkstra_search, dijkstra_steps, uniform_cost_search
from .greedy import greedy_best_first_search, greedy_steps
from .runner import run_to_completion
from .strategy import Algorithm, run_search, search
