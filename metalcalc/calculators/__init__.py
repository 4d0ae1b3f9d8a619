"""
Profile geometry.

Pure Python math, one calculator per formula id.
Given canonical dimensions in millimetres and a density in g/cm³,
produce the weight of one piece and the weight per metre.
"""
