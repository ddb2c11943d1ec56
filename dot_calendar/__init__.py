"""
Year-progress dot calendar wallpapers.

Architecture:
    progress   - day of year, days left, past/today/future classification
    layout     - dot grid and month mosaic geometry
    text       - greedy paragraph wrapping
    palette    - per-variant colors parsed from bare hex
    fonts      - fonts registered once at startup
    renderer   - draws both wallpapers with Pillow
    background - optional remote background image
    server     - FastAPI app serving /wallpaper and /days
    generate   - CLI writing both wallpapers to disk
"""

__version__ = "1.0.0"
