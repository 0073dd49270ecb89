# viz/renderer_colors.py
BG = (15, 15, 15)
GRID = (35, 35, 35)
BODY = (40, 160, 70)
HEAD = (60, 200, 90)
APPLE = (220, 70, 70)
