from __future__ import annotations
import argparse, functools, logging
from .config import init_cfg_from_args
from .live import Engine, LiveScheduler
from .logging_config import configure_logging
from .topology import build_snapshot
from .web import create_app

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='Live Wi-Fi signal + gateway RTT monitor')
    ap.add_argument('--port', type=int, default=None, help='HTTP port (default: $PORT or 3000)')
    ap.add_argument('--interval', type=float, default=None, help='seconds between shared measurement ticks')
    ap.add_argument('--scanner', type=str, default=None, help='path to the wifi-scanner executable')
    ap.add_argument('--config', type=str, default=None, help='YAML or JSON file with setting overrides')
    return ap.parse_args(argv)

def main(argv=None):
    configure_logging()
    args = parse_args(argv)
    cfg = init_cfg_from_args(args)

    engine = Engine()
    engine.start()
    scheduler = LiveScheduler(functools.partial(build_snapshot, cfg), interval=cfg.scan_interval)

    app = create_app(cfg, engine, scheduler)
    socketio = app.extensions["socketio"]
    print("\n  Wi-Fi RTT Live")
    print(f"  Local: http://localhost:{cfg.port}")
    print(f"  Mode:  RSSI + RTT (tcp x{cfg.tcp_samples}, icmp x{cfg.icmp_samples})")
    print(f"  Scan interval: {cfg.scan_interval:g}s\n")
    try:
        socketio.run(app, host=cfg.host, port=cfg.port, debug=False,
                     use_reloader=False, allow_unsafe_werkzeug=True)
    finally:
        engine.call(scheduler.close)
        engine.stop()
        logger.info("shut down")

if __name__ == '__main__':
    main()
