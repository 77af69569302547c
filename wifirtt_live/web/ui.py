HTML = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>Wi-Fi RTT Live</title>
  <script src="https://cdn.socket.io/4.7.5/socket.io.min.js"></script>
  <style>
    body { background:#14181d; color:#e8eaed; font-family: ui-sans-serif,system-ui,Segoe UI,Arial; }
    table { border-collapse: collapse; width: 100%; }
    td, th { padding: 4px 10px; border-bottom: 1px solid #2a2f36; text-align: left; }
    .card { border: 1px solid #2a2f36; border-radius: 12px; padding: 12px; margin-bottom: 16px; }
    #status.err { color: #e06666; }
  </style>
</head>
<body>
  <h2>Wi-Fi RSSI + RTT (Live)</h2>
  <div id="status">connecting…</div>
  <div class="card" id="gateway"></div>
  <div class="card">
    <table>
      <thead><tr><th>SSID</th><th>BSSID</th><th>RSSI</th><th>Noise</th><th>Ch</th><th>Band</th><th>Width</th></tr></thead>
      <tbody id="nets"></tbody>
    </table>
  </div>
  <div class="card">
    <table>
      <thead><tr><th>IP</th><th>MAC</th></tr></thead>
      <tbody id="arp"></tbody>
    </table>
  </div>

  <script>
  (function(){
    const esc = s => String(s ?? '').replace(/[&<>"]/g, c => ({'&':'&amp;','<':'&lt;','>':'&gt;','"':'&quot;'}[c]));
    const fmt = v => (v === null || v === undefined) ? '–' : Number(v).toFixed(2) + ' ms';

    function summary(label, s){
      if(!s) return `<div>${label}: no samples</div>`;
      const jitter = s.jitter === null ? '' : `, jitter ${fmt(s.jitter)}`;
      return `<div>${label}: avg ${fmt(s.avg)} (min ${fmt(s.min)}, max ${fmt(s.max)}, n=${s.sampleCount}${jitter})</div>`;
    }

    function render(data){
      const st = document.getElementById('status');
      if (data.error) { st.textContent = 'scan error: ' + data.error; st.className = 'err'; return; }
      st.className = '';
      st.textContent = `${data.connectedSSID || 'not connected'} · ${data.networks.length} networks`
        + ` · ${new Date(data.timestamp * 1000).toLocaleTimeString()}`;

      const gw = data.gatewayLatency;
      document.getElementById('gateway').innerHTML = gw
        ? `<b>Gateway ${esc(gw.host)}</b>` + summary('TCP', gw.tcp) + summary('ICMP', gw.icmp)
        : '<b>Gateway</b> unknown';

      document.getElementById('nets').innerHTML = data.networks.map(n =>
        `<tr><td>${esc(n.ssid)}</td><td>${esc(n.bssid)}</td><td>${n.rssi}</td><td>${n.noise}</td>`
        + `<td>${n.channel}</td><td>${esc(n.band)}</td><td>${n.bandwidthMHz} MHz</td></tr>`).join('');
      document.getElementById('arp').innerHTML = data.addressTable.map(e =>
        `<tr><td>${esc(e.ip)}</td><td>${esc(e.mac)}</td></tr>`).join('');
    }

    const socket = io();
    socket.on('snapshot', msg => {
      try { render(JSON.parse(msg)); } catch(e){ console.error(e); }
    });
    socket.on('disconnect', () => { document.getElementById('status').textContent = 'disconnected'; });
  })();
  </script>
</body>
</html>
"""

def render_html(interval: float) -> str:
    return HTML.replace("<h2>Wi-Fi RSSI + RTT (Live)</h2>",
                        f"<h2>Wi-Fi RSSI + RTT (Live, every {interval:g}s)</h2>")
