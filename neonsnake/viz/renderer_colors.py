# neonsnake/viz/renderer_colors.py
BG = (15, 23, 42)
GRID = (51, 65, 85)
HEAD = (14, 165, 233)
BODY = (14, 165, 233)
EYE = (255, 255, 255)
FOOD = (34, 197, 94)
POWERUP = (250, 204, 21)
TEXT = (226, 232, 240)
OVERLAY = (2, 6, 23)
COLLISION = (56, 189, 248)
