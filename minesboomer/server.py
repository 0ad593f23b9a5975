"""WebSocket game server: matches hosts with clients and relays moves."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import uuid
from pathlib import Path
from typing import Dict, List, Optional

from aiohttp import WSMsgType, web

from minesboomer.geometry import Point
from minesboomer.hosted_game import HostedGame
from minesboomer.messages import (
    CellSelectedMessage,
    CreateGameMessage,
    GameDefinition,
    GameStartMessage,
    JoinGameMessage,
    MessageError,
    OpenGamesMessage,
    SimpleMessage,
)

log = logging.getLogger(__name__)

_LOCAL_DIST = Path(__file__).resolve().parent.parent / "dist"
_DEFAULT_DIST = "/dist"


class Server:
    """Keeps the hosted games and one outgoing queue per connection."""

    def __init__(self) -> None:
        self.games: List[HostedGame] = []
        self.connections: Dict[str, "asyncio.Queue[str]"] = {}

    def connect(self, connection_id: str) -> "asyncio.Queue[str]":
        """Register a connection and return its queue of outgoing texts."""
        outbox: "asyncio.Queue[str]" = asyncio.Queue()
        outbox.put_nowait(SimpleMessage("connected").to_json())
        self.connections[connection_id] = outbox
        log.info("connection established: %s", connection_id)
        return outbox

    def disconnect(self, connection_id: str) -> None:
        """Forget a connection and drop it from the game it was part of."""
        outbox = self.connections.pop(connection_id, None)
        log.info("%s disconnected", connection_id)
        if outbox is not None:
            self._remove_player(connection_id, outbox)

    def _remove_player(self, player_id: str, outbox: "asyncio.Queue[str]") -> None:
        hosted = next((game for game in self.games if game.host == player_id), None)
        if hosted is not None:
            self.games.remove(hosted)
            outbox.put_nowait(SimpleMessage("host_disconnected").to_json())
            return
        joined = next((game for game in self.games if game.client == player_id), None)
        if joined is not None:
            joined.remove_client()
            outbox.put_nowait(SimpleMessage("client_disconnected").to_json())

    def _find_game(self, game_id: str) -> Optional[HostedGame]:
        return next((game for game in self.games if game.id == game_id), None)

    def handle_message(self, text: str, sender_id: str) -> None:
        """Act on one text received from ``sender_id``; unknown input is ignored."""
        outbox = self.connections.get(sender_id)
        if outbox is None:
            return

        try:
            selected = CellSelectedMessage.from_json(text)
        except MessageError:
            pass
        else:
            game = self._find_game(selected.game_id)
            if game is not None:
                game.player_selected(selected.coordinates)
                self._send_selected_to_players(game, selected.coordinates, sender_id)
            return

        try:
            create = CreateGameMessage.from_json(text)
        except MessageError:
            pass
        else:
            game = HostedGame(sender_id, str(uuid.uuid4()), create.game.difficulty)
            game.set_local_name(create.game.host_name)
            self.games.append(game)
            log.info("created game %s", game.id)
            outbox.put_nowait(SimpleMessage("waiting_enemy").to_json())
            for connection_id, other in self.connections.items():
                if connection_id != sender_id:
                    self._send_open_games(other)
            return

        try:
            join = JoinGameMessage.from_json(text)
        except MessageError:
            pass
        else:
            game = self._find_game(join.game_id)
            if game is not None:
                game.set_client(sender_id, join.client_name)
                game.setup_multi_game()
                self._send_new_game_to_players(game)
            return

        try:
            simple = SimpleMessage.from_json(text)
        except MessageError:
            return
        if simple.name == "games_request":
            self._send_open_games(outbox)

    def _send_open_games(self, outbox: "asyncio.Queue[str]") -> None:
        definitions = [
            GameDefinition(host_name=game.host_name, id=game.id, difficulty=game.difficulty)
            for game in self.games
            if not game.has_client()
        ]
        outbox.put_nowait(OpenGamesMessage(definitions).to_json())

    def _send_selected_to_players(self, game: HostedGame, coordinates: Point, sender_id: str) -> None:
        for player in game.players():
            outbox = self.connections.get(player)
            if outbox is None:
                return
            message = CellSelectedMessage(
                game_id=game.id,
                is_remote_sender=sender_id != player,
                is_active_player=game.is_player_active(player),
                coordinates=coordinates,
            )
            outbox.put_nowait(message.to_json())

    def _send_new_game_to_players(self, game: HostedGame) -> None:
        for player in game.players():
            if player == game.host:
                local_name, remote_name = game.host_name, game.client_name
            else:
                local_name, remote_name = game.client_name, game.host_name
            outbox = self.connections.get(player)
            if outbox is None:
                continue
            message = GameStartMessage(
                game_id=game.id,
                local_player=local_name,
                remote_player=remote_name,
                is_active=game.is_player_active(player),
                game=game.inner_game,
            )
            outbox.put_nowait(message.to_json())

    async def handle_connection(self, request: web.Request) -> web.WebSocketResponse:
        """Serve one WebSocket client until it disconnects."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)
        connection_id = str(uuid.uuid4())
        outbox = self.connect(connection_id)

        async def forward() -> None:
            while True:
                await ws.send_str(await outbox.get())

        async def receive() -> None:
            async for message in ws:
                if message.type is WSMsgType.TEXT:
                    text = message.data
                elif message.type is WSMsgType.BINARY:
                    try:
                        text = message.data.decode("utf-8")
                    except UnicodeDecodeError:
                        continue
                else:
                    continue
                log.debug("received from %s: %s", connection_id, text)
                self.handle_message(text, connection_id)

        tasks = {asyncio.create_task(receive()), asyncio.create_task(forward())}
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            self.disconnect(connection_id)
            if not ws.closed:
                await ws.close()
        return ws


def _static_handler(root: Path):
    root = root.resolve()

    async def serve(request: web.Request) -> web.StreamResponse:
        target = (root / request.match_info.get("tail", "")).resolve()
        if target != root and root not in target.parents:
            raise web.HTTPNotFound()
        if target.is_dir():
            target = target / "index.html"
        if not target.is_file():
            raise web.HTTPNotFound()
        return web.FileResponse(target)

    return serve


def create_app(server: Server, dist_path: str) -> web.Application:
    """Build the web application: the game socket at /ws, static files elsewhere."""
    app = web.Application()
    app.router.add_get("/ws", server.handle_connection)
    app.router.add_get("/{tail:.*}", _static_handler(Path(dist_path)))
    return app


def dist_path() -> str:
    """Return the directory of static files to serve."""
    configured = os.environ.get("DIST_PATH")
    if configured is not None:
        return configured
    return str(_LOCAL_DIST) if _LOCAL_DIST.exists() else _DEFAULT_DIST


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the two-player minesweeper server.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=None, help="port (default: $PORT or 8080)")
    args = parser.parse_args(argv)

    port = args.port if args.port is not None else int(os.environ.get("PORT", "8080"))
    logging.basicConfig(level=logging.INFO)
    app = create_app(Server(), dist_path())
    web.run_app(
        app,
        host=args.host,
        port=port,
        print=lambda _: print(f"-> Ready to serve: {args.host}:{port}"),
    )


if __name__ == "__main__":
    main()