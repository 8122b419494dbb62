from .mazes import MAZES, all_mazes, complex_maze, corners, load_maze, simple_maze, spiral_maze
