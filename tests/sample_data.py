"""Shared scanner payloads for tests."""

import json

SCAN = {
    "timestamp": 1760860800.5,
    "networks": [
        {"ssid": "home", "bssid": "aa:bb:cc:00:00:01", "rssi": -41, "noise": -92,
         "channel": 36, "band": "5GHz", "bandwidthMHz": 80},
        {"ssid": "Hidden_00:00:02", "bssid": "aa:bb:cc:00:00:02", "rssi": -70, "noise": -90,
         "channel": 6, "band": "2.4GHz", "bandwidthMHz": 20},
    ],
    "connectedSSID": "home",
    "connectedBSSID": "aa:bb:cc:00:00:01",
    "connectedRSSI": -41,
    "connectedNoise": -92,
    "connectedTxRate": 866.0,
    "gatewayIP": "192.168.1.1",
    "locationAuthorized": True,
    "totalRawNetworks": 3,
}

SCAN_NO_GATEWAY = dict(SCAN, gatewayIP=None, connectedSSID=None, connectedBSSID=None,
                       connectedRSSI=None, connectedNoise=None, connectedTxRate=None)

SCAN_JSON = json.dumps(SCAN)

ARP_OUTPUT = """\
? (192.168.1.1) at a4:2b:b0:11:22:33 on en0 ifscope [ethernet]
? (192.168.1.23) at 3c:22:fb:aa:bb:cc on en0 ifscope [ethernet]
? (192.168.1.255) at ff:ff:ff:ff:ff:ff on en0 ifscope [ethernet]
? (224.0.0.251) at 1:0:5e:0:0:fb on en0 ifscope permanent [ethernet]
? (192.168.1.40) at (incomplete) on en0 ifscope [ethernet]
"""
