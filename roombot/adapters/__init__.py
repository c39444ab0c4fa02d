"""Adapters — aiohttp transport, loggers and the FastAPI relay."""
