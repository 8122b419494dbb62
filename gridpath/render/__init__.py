from .console import animate, render_frame
