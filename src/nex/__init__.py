"""nex — discover and run the examples of a .NET repository.

Built around a pure discovery/resolution core with a thin ``dotnet``
subprocess adapter and an argparse + Rich command line.
"""

from nex.version import __version__

__all__: list[str] = ["__version__"]
