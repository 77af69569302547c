from __future__ import annotations
from dataclasses import dataclass, fields
import json
import logging
import os
from typing import Optional

import yaml

from .utils.path import to_abs_path

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_SCANNER = "WifiScanner.app/Contents/MacOS/wifi-scanner"

@dataclass
class CFG:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    scanner_path: str = DEFAULT_SCANNER
    scan_interval: float = 3.0      # shared tick, seconds
    tcp_samples: int = 5
    tcp_port: int = 80
    tcp_stagger: float = 0.05       # delay between successive connect attempts
    icmp_samples: int = 10
    icmp_interval: float = 0.1
    probe_timeout: float = 2.0      # per connect attempt / per echo
    scan_timeout: float = 10.0
    arp_timeout: float = 5.0
    ping_timeout: float = 15.0      # whole ping invocation

    def apply(self, overrides: dict) -> None:
        known = {f.name for f in fields(self)}
        for k, v in (overrides or {}).items():
            if k not in known:
                logger.warning("unknown config key ignored: %s", k)
                continue
            cur = getattr(self, k)
            setattr(self, k, type(cur)(v))

def load_config_file(path: Optional[str]) -> dict:
    if not path:
        return {}
    p = to_abs_path(path)
    if not p:
        return {}
    if not p.exists():
        logger.warning("config not found: %s", p)
        return {}
    txt = p.read_text(encoding="utf-8")
    data = yaml.safe_load(txt) if p.suffix in (".yaml", ".yml") else json.loads(txt)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"config {p} must hold a mapping, got {type(data).__name__}")
    return data or {}

def init_cfg_from_args(args) -> CFG:
    cfg = CFG(port=int(os.environ.get("PORT", DEFAULT_PORT)))
    cfg.apply(load_config_file(getattr(args, "config", None)))
    if getattr(args, "port", None):
        cfg.port = int(args.port)
    if getattr(args, "interval", None):
        cfg.scan_interval = float(args.interval)
    if getattr(args, "scanner", None):
        cfg.scanner_path = args.scanner
    if cfg.scan_interval <= 0:
        raise ValueError("scan interval must be positive")
    p = to_abs_path(cfg.scanner_path)
    if p and p.exists():
        cfg.scanner_path = str(p)
    else:
        logger.warning("scanner '%s' not found; scans will fail until it exists", cfg.scanner_path)
    return cfg
