"""Run the relay server: ``python -m roombot``."""

from roombot.adapters.web.server import main

if __name__ == "__main__":
    main()
