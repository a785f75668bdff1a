"""
首页 HTML 模板
"""
import html

_LANDING_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>podprobe on OpenShift</title>
<style>
  :root {{ --accent: #3776ab; --bg: #0d1117; --card: #161b22; --text: #c9d1d9; --dim: #8b949e; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: 'Segoe UI', system-ui, sans-serif; background: var(--bg); color: var(--text); min-height: 100vh; display: flex; align-items: center; justify-content: center; }}
  .container {{ max-width: 720px; width: 90%; padding: 2rem; }}
  h1 {{ font-size: 2.5rem; margin-bottom: 0.25rem; }}
  h1 span {{ color: var(--accent); }}
  .subtitle {{ color: var(--dim); font-size: 1.1rem; margin-bottom: 2rem; }}
  .hostname {{ background: var(--card); border: 1px solid #30363d; border-radius: 8px; padding: 1rem 1.25rem; margin-bottom: 2rem; font-family: monospace; }}
  .hostname strong {{ color: var(--accent); }}
  .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1rem; margin-bottom: 2rem; }}
  .card {{ background: var(--card); border: 1px solid #30363d; border-radius: 8px; padding: 1.25rem; }}
  .card:hover {{ border-color: var(--accent); }}
  .card h3 {{ font-size: 0.85rem; text-transform: uppercase; letter-spacing: 0.05em; color: var(--dim); margin-bottom: 0.5rem; }}
  .card a {{ color: var(--accent); text-decoration: none; font-family: monospace; font-size: 1.05rem; }}
  .card p {{ color: var(--dim); font-size: 0.85rem; margin-top: 0.4rem; }}
  .footer {{ color: var(--dim); font-size: 0.8rem; text-align: center; margin-top: 1rem; }}
</style>
</head>
<body>
<div class="container">
  <h1><span>podprobe</span> on OpenShift</h1>
  <p class="subtitle">A lightweight container demo &mdash; running and ready.</p>

  <div class="hostname">
    <strong>Pod:</strong> {hostname} &nbsp;|&nbsp;
    <strong>Uptime:</strong> <span class="uptime">{uptime}s</span> &nbsp;|&nbsp;
    <strong>Started:</strong> {started_at} &nbsp;|&nbsp;
    <strong>UID:</strong> {uid}
  </div>

  <div class="grid">
{cards}
  </div>

  <p class="footer">Built with FastAPI &bull; Served by uvicorn &bull; v{version}</p>
</div>
</body>
</html>
"""

_CARD_TEMPLATE = """    <div class="card">
      <h3>{title}</h3>
      <a href="{href}">{href}</a>
      <p>{description}</p>
    </div>"""

# (标题, 链接, 说明)
ENDPOINT_CARDS = [
    ("Health", "/healthz", "Liveness probe endpoint"),
    ("Ready", "/readyz", "Readiness probe endpoint"),
    ("Container Info", "/info", "Runtime environment &amp; system details"),
    ("Fibonacci", "/fib?n=40", "CPU stress test via naive recursion"),
    ("Crash Test", "/crash", "Trigger a crash &mdash; test restart policy"),
    ("Metrics", "/metrics", "Prometheus-style metrics"),
]


def render_landing(hostname: str, uptime: int, uid: int, version: str = "",
                   started_at: str = "") -> str:
    """渲染首页，主机名做 HTML 转义"""
    cards = "\n".join(
        _CARD_TEMPLATE.format(title=title, href=href, description=description)
        for title, href, description in ENDPOINT_CARDS
    )
    return _LANDING_TEMPLATE.format(
        hostname=html.escape(hostname),
        uptime=uptime,
        started_at=html.escape(started_at),
        uid=uid,
        version=html.escape(version),
        cards=cards,
    )
