# viz/renderer_colors.py
BG = (0, 0, 0)
GRID = (30, 30, 30)
FOOD = (255, 0, 0)
HEAD = (0, 230, 0)
BODY = (0, 191, 0)
TEXT = (230, 230, 230)
