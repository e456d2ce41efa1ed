# Node scale samples: (r, g, b) in 0..255 -> (h degrees, s percent, l percent)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
    (255, 204, 0): (48.0, 100.0, 50.0),
    (204, 0, 0): (0.0, 100.0, 40.0),
    (0, 204, 0): (120.0, 100.0, 40.0),
    (0, 0, 204): (240.0, 100.0, 40.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (51, 102, 153): (210.0, 50.0, 40.0),
}

# Unit space samples: (r, g, b) in [0, 1] -> (h degrees, s [0, 1], l [0, 1])
samples_unit_rgb_hsl = {
    (r / 255, g / 255, b / 255): (h, s / 100, l / 100)
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items()
}
