"""
Starter network template for octiline
"""

MINIMAL_CONFIG_TEMPLATE = """# Metro Network Configuration
# ============================================================================
# Stations sit on integer grid vertices. Lines list station ids in order.

project: "My City Metro"

# Stations
# ----------------------------------------------------------------------------
# Either a list of {id, x, y} or a mapping of id -> [x, y]
stations:
  harbour: [0, 10]
  market: [14, 14]
  museum: [14, 4]
  park: [6, 0]
  stadium: [22, 8]

# Lines
# ----------------------------------------------------------------------------
lines:
  - name: "Red"
    color: "#e4002b"
    stations: [harbour, market, stadium]

  - name: "Blue"
    color: "#0019a8"
    stations: [park, museum, market]
    # entry_direction: EAST   # Optional heading at the first station

  # - name: "Circle"
  #   color: "#ffd300"
  #   stations: [park, museum, stadium, market, harbour]
  #   loop: true

# Corner smoothing
# ----------------------------------------------------------------------------
routing:
  corner_radius: 0.4     # Base fillet radius in grid units
  corner_style: "cubic"  # Options: cubic, arc
  tightness: 0.55        # Cubic handle length (0-1)
  smooth_corners: true

# Output
# ----------------------------------------------------------------------------
output:
  directory: "route_results"
  formats: ["json", "csv", "svg"]
  file_prefix: "network"
  scale: 40              # Pixels per grid unit in the SVG map
  stroke_width: 6
"""
