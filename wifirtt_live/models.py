from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol

from .errors import ScanUnavailable


class Technique(str, Enum):
    TCP = "tcp-connect"
    ICMP = "icmp-echo"


@dataclass(frozen=True)
class LatencySample:
    technique: Technique
    ms: float


@dataclass(frozen=True)
class LatencySummary:
    technique: Technique
    avg: float
    min: float
    max: float
    sample_count: int
    jitter: Optional[float] = None
    all_values: tuple[float, ...] = ()

    def to_dict(self) -> dict:
        return {
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
            "sampleCount": self.sample_count,
            "jitter": self.jitter,
            "allValues": list(self.all_values),
        }


@dataclass(frozen=True)
class HostLatency:
    host: str
    tcp: Optional[LatencySummary] = None
    icmp: Optional[LatencySummary] = None

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "tcp": self.tcp.to_dict() if self.tcp else None,
            "icmp": self.icmp.to_dict() if self.icmp else None,
        }


@dataclass(frozen=True)
class AddressEntry:
    ip: str
    mac: str

    def to_dict(self) -> dict:
        return {"ip": self.ip, "mac": self.mac}


@dataclass(frozen=True)
class NetworkInfo:
    ssid: str
    bssid: str
    rssi: int
    noise: int
    channel: int
    band: str
    bandwidth_mhz: int

    @classmethod
    def from_dict(cls, d: dict) -> NetworkInfo:
        return cls(
            ssid=str(d["ssid"]),
            bssid=str(d["bssid"]),
            rssi=int(d["rssi"]),
            noise=int(d["noise"]),
            channel=int(d["channel"]),
            band=str(d["band"]),
            bandwidth_mhz=int(d["bandwidthMHz"]),
        )

    def to_dict(self) -> dict:
        return {
            "ssid": self.ssid, "bssid": self.bssid,
            "rssi": self.rssi, "noise": self.noise,
            "channel": self.channel, "band": self.band,
            "bandwidthMHz": self.bandwidth_mhz,
        }


def _opt(d: dict, key: str, conv):
    v = d.get(key)
    return None if v is None else conv(v)


def _flag(v) -> bool:
    # JSON true/false only; "false" or 0 is a malformed payload, not a truthy one
    if not isinstance(v, bool):
        raise TypeError(f"expected a boolean, got {v!r}")
    return v


@dataclass(frozen=True)
class ScanResult:
    timestamp: float
    networks: tuple[NetworkInfo, ...]
    location_authorized: bool
    total_raw_networks: int
    connected_ssid: Optional[str] = None
    connected_bssid: Optional[str] = None
    connected_rssi: Optional[int] = None
    connected_noise: Optional[int] = None
    connected_tx_rate: Optional[float] = None
    gateway_ip: Optional[str] = None

    @classmethod
    def from_dict(cls, d) -> ScanResult:
        """Parse the scanner's JSON object; anything malformed is ScanUnavailable."""
        if not isinstance(d, dict):
            raise ScanUnavailable("Invalid scanner output")
        if "error" in d and "networks" not in d:
            raise ScanUnavailable(f"Scanner failed: {d['error']}")
        try:
            nets = d["networks"]
            if not isinstance(nets, list):
                raise TypeError("networks is not a list")
            return cls(
                timestamp=float(d["timestamp"]),
                networks=tuple(NetworkInfo.from_dict(n) for n in nets),
                location_authorized=_flag(d["locationAuthorized"]),
                total_raw_networks=int(d["totalRawNetworks"]),
                connected_ssid=_opt(d, "connectedSSID", str),
                connected_bssid=_opt(d, "connectedBSSID", str),
                connected_rssi=_opt(d, "connectedRSSI", int),
                connected_noise=_opt(d, "connectedNoise", int),
                connected_tx_rate=_opt(d, "connectedTxRate", float),
                gateway_ip=_opt(d, "gatewayIP", str) or None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ScanUnavailable(f"Invalid scanner output: {e}") from e

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "networks": [n.to_dict() for n in self.networks],
            "connectedSSID": self.connected_ssid,
            "connectedBSSID": self.connected_bssid,
            "connectedRSSI": self.connected_rssi,
            "connectedNoise": self.connected_noise,
            "connectedTxRate": self.connected_tx_rate,
            "gatewayIP": self.gateway_ip,
            "locationAuthorized": self.location_authorized,
            "totalRawNetworks": self.total_raw_networks,
        }


@dataclass(frozen=True)
class TopologySnapshot:
    scan: ScanResult
    address_table: tuple[AddressEntry, ...] = field(default_factory=tuple)
    gateway_latency: Optional[HostLatency] = None

    @property
    def timestamp(self) -> float:
        return self.scan.timestamp

    @property
    def gateway_ip(self) -> Optional[str]:
        return self.scan.gateway_ip

    def to_dict(self) -> dict:
        out = self.scan.to_dict()
        out["addressTable"] = [e.to_dict() for e in self.address_table]
        out["gatewayLatency"] = self.gateway_latency.to_dict() if self.gateway_latency else None
        return out


class ViewerConnection(Protocol):
    @property
    def writable(self) -> bool: ...

    def send(self, message: str) -> None: ...
