"""Tests for scan parsing and snapshot serialization."""

import pytest

from tests.sample_data import SCAN, SCAN_NO_GATEWAY
from wifirtt_live.errors import ScanUnavailable
from wifirtt_live.models import (
    AddressEntry,
    HostLatency,
    LatencySummary,
    ScanResult,
    Technique,
    TopologySnapshot,
)


class TestScanResult:
    """ScanResult.from_dict() validation and round trip to wire keys."""

    def test_parse_full(self):
        scan = ScanResult.from_dict(SCAN)

        assert scan.gateway_ip == "192.168.1.1"
        assert scan.connected_ssid == "home"
        assert scan.connected_tx_rate == 866.0
        assert len(scan.networks) == 2
        assert scan.networks[0].bandwidth_mhz == 80
        assert scan.to_dict() == SCAN

    def test_optional_fields_absent(self):
        """Not connected: connected* and gatewayIP may be null or missing."""
        minimal = {k: SCAN[k] for k in ("timestamp", "networks", "locationAuthorized", "totalRawNetworks")}

        scan = ScanResult.from_dict(minimal)

        assert scan.gateway_ip is None
        assert scan.connected_rssi is None
        assert ScanResult.from_dict(SCAN_NO_GATEWAY).gateway_ip is None

    def test_empty_gateway_string_is_absent(self):
        assert ScanResult.from_dict(dict(SCAN, gatewayIP="")).gateway_ip is None

    @pytest.mark.parametrize("bad", [
        [],
        "text",
        {k: v for k, v in SCAN.items() if k != "networks"},
        dict(SCAN, networks="none"),
        dict(SCAN, networks=[{"ssid": "x"}]),
        dict(SCAN, timestamp="yesterday"),
        dict(SCAN, locationAuthorized="false"),
        dict(SCAN, locationAuthorized=1),
        dict(SCAN, locationAuthorized=None),
    ])
    def test_malformed_raises_scan_unavailable(self, bad):
        with pytest.raises(ScanUnavailable):
            ScanResult.from_dict(bad)

    def test_scanner_error_object(self):
        """The scanner's own {"error": ...} report is carried through."""
        with pytest.raises(ScanUnavailable, match="No Wi-Fi interface found"):
            ScanResult.from_dict({"error": "No Wi-Fi interface found"})


class TestTopologySnapshot:
    """Flattened snapshot wire format."""

    def test_to_dict_merges_scan_fields(self):
        tcp = LatencySummary(Technique.TCP, 2.0, 1.0, 3.0, 3, None, (1.0, 2.0, 3.0))
        snap = TopologySnapshot(
            scan=ScanResult.from_dict(SCAN),
            address_table=(AddressEntry("192.168.1.1", "a4:2b:b0:11:22:33"),),
            gateway_latency=HostLatency("192.168.1.1", tcp=tcp, icmp=None),
        )

        d = snap.to_dict()

        assert d["networks"] == SCAN["networks"]
        assert d["gatewayIP"] == "192.168.1.1"
        assert d["addressTable"] == [{"ip": "192.168.1.1", "mac": "a4:2b:b0:11:22:33"}]
        assert d["gatewayLatency"]["host"] == "192.168.1.1"
        assert d["gatewayLatency"]["tcp"]["sampleCount"] == 3
        assert d["gatewayLatency"]["icmp"] is None
        assert snap.timestamp == SCAN["timestamp"]

    def test_no_gateway_latency_is_null(self):
        snap = TopologySnapshot(scan=ScanResult.from_dict(SCAN_NO_GATEWAY))

        d = snap.to_dict()

        assert d["gatewayLatency"] is None
        assert d["addressTable"] == []
