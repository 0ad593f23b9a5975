"""Two-player Minesweeper: game rules, JSON wire messages and an aiohttp WebSocket server."""

__version__ = "0.1.0"