from __future__ import annotations
from dataclasses import dataclass, field

from flask import Flask, Response, current_app, request
from flask_socketio import SocketIO

from ..collectors import fetch_address_table, fetch_scan
from ..config import CFG
from ..errors import InvalidHostParameter, ScanUnavailable
from ..probe import measure_host
from ..utils.net import validate_ipv4
from ..utils.serial import dumps
from .ui import render_html

SNAPSHOT_EVENT = "snapshot"

def json_response(obj, status: int = 200) -> Response:
    return Response(dumps(obj), status=status, mimetype="application/json")

@dataclass(frozen=True)
class SocketViewer:
    """One Socket.IO session; equality and hashing go by sid only."""
    sid: str
    socketio: SocketIO = field(compare=False, repr=False)
    namespace: str = field(default="/", compare=False)

    @property
    def writable(self) -> bool:
        return self.socketio.server.manager.is_connected(self.sid, self.namespace)

    def send(self, message: str) -> None:
        self.socketio.emit(SNAPSHOT_EVENT, message, to=self.sid, namespace=self.namespace)

async def scheduler_stats(scheduler) -> dict:
    return scheduler.stats()

def create_app(cfg: CFG, engine, scheduler) -> Flask:
    app = Flask(__name__)
    socketio = SocketIO(app, async_mode="threading", cors_allowed_origins="*")

    @app.errorhandler(InvalidHostParameter)
    def invalid_host(e):
        return json_response({"error": str(e)}, 400)

    @app.errorhandler(ScanUnavailable)
    def scan_unavailable(e):
        current_app.logger.warning("scan request failed: %s", e)
        return json_response({"error": str(e)}, 500)

    @app.get("/")
    def index():
        return Response(render_html(cfg.scan_interval), mimetype="text/html")

    @app.get("/api/scan")
    def api_scan():
        return json_response(engine.run(fetch_scan(cfg)).to_dict())

    @app.get("/api/rtt/<host>")
    def api_rtt(host):
        validate_ipv4(host)
        return json_response(engine.run(measure_host(host, cfg)).to_dict())

    @app.get("/api/arp")
    def api_arp():
        return json_response([e.to_dict() for e in engine.run(fetch_address_table(cfg))])

    @app.get("/api/status")
    def api_status():
        return json_response(engine.run(scheduler_stats(scheduler)))

    @socketio.on("connect")
    def on_connect(auth=None):
        engine.call(scheduler.connect, SocketViewer(request.sid, socketio))

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        engine.call(scheduler.disconnect, SocketViewer(request.sid, socketio))

    return app
