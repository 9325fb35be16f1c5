"""Film Wizard.

A one-click movie suggestion tool: pick genres, a release year range,
a rating floor and a runtime ceiling, and get one random matching movie
from TMDb together with its poster, director and cast.
"""

__version__ = "0.1.0"
