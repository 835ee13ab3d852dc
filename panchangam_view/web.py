"""Flask web application for the panchangam page and API."""

import flask  # Web server and templating

from .config import Config  # App configuration
from .service import PanchangamService  # Service providing rendered fields


def create_app(service: PanchangamService) -> flask.Flask:
    """Create and configure the Flask application.

    Args:
      service: `PanchangamService` that loads and renders the report.

    Returns:
      A Flask app instance with routes for the page and the JSON API.
    """
    app = flask.Flask(__name__)

    @app.route("/")
    def index():
        """Render the panchangam page for the current local time."""
        result = service.render()
        f = result.fields
        return flask.render_template_string(
            _INDEX_TEMPLATE,
            ok=result.ok,
            status=result.status,
            f=f,
            refresh_sec=Config.REFRESH_SEC,
            periods=[
                ("Tithi", "tithi"),
                ("Nakshatram", "nak"),
                ("Yogam", "yoga"),
                ("Karanam", "karana"),
            ],
        )

    @app.route("/api/panchangam")
    def api_panchangam():
        """Return the rendered display fields as JSON."""
        result = service.render()
        body = {
            "ok": result.ok,
            "status": result.status,
            "source": result.source,
            "fields": result.fields,
        }
        return (body, 200) if result.ok else (body, 503)

    return app


_INDEX_TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Panchangam</title>
  <style>
    body { font-family: system-ui, Arial, sans-serif; margin: 0; background: #111; color: #eee; }
    header { padding: 12px 16px; background: #222; display: flex; align-items: center; justify-content: space-between; gap: 12px; }
    main { padding: 16px; display: grid; gap: 12px; grid-template-columns: repeat(auto-fill, minmax(280px, 1fr)); }
    .card { background: #1b1b1b; padding: 12px; border-radius: 8px; }
    .card h3 { margin: 0 0 8px 0; color: #9eeaff; font-size: 15px; }
    .row { display: flex; justify-content: space-between; gap: 8px; padding: 2px 0; }
    .label { color: #9aa; }
    .meta { color: #9aa; font-size: 12px; }
    .status.ok { color: #bff5bf; }
    .status.err { color: #ff9a9a; }
  </style>
  {% if refresh_sec > 0 %}
  <meta http-equiv="refresh" content="{{ refresh_sec }}">
  {% endif %}
</head>
<body>
  <header>
    <div>
      <div id="now-display">{{ f.get('now-display', '') }}</div>
      <div id="backend-time" class="meta">{{ f.get('backend-time', '') }}</div>
    </div>
    <div id="status" class="status {{ 'ok' if ok else 'err' }}">{{ status }}</div>
  </header>
  {% if ok %}
  <main>
    <div class="card">
      <h3>Calendar</h3>
      {% for label, key in [('Samvatsaram', 'samvatsaram'), ('Ayanam', 'ayanam'), ('Ruthu', 'ruthu'), ('Masam', 'masam'), ('Paksham', 'paksham')] %}
        <div class="row"><span class="label">{{ label }}</span><span id="{{ key }}">{{ f[key] }}</span></div>
      {% endfor %}
    </div>
    <div class="card">
      <h3>Today</h3>
      <div class="row"><span class="label">Vaasaram</span><span id="vasaram-today">{{ f['vasaram-today'] }}</span></div>
      <div class="row"><span class="label">Sunrise</span><span id="sunrise-time">{{ f['sunrise-time'] }}</span></div>
      <div class="row"><span class="label">Noon</span><span id="noon-time">{{ f['noon-time'] }}</span></div>
      <div class="row"><span class="label">Sunset</span><span id="sunset-time">{{ f['sunset-time'] }}</span></div>
      <div class="row"><span class="label">Aparaanha kaalam</span><span id="aparahna-time">{{ f['aparahna-time'] }}</span></div>
    </div>
    {% for title, key in periods %}
      <div class="card">
        <h3>{{ title }}</h3>
        <div class="row"><span class="label">Current</span><span id="{{ key }}-current">{{ f[key ~ '-current'] }}</span></div>
        <div class="meta" id="{{ key }}-remaining">{{ f[key ~ '-remaining'] }}</div>
        <div class="row"><span class="label">Next</span><span id="{{ key }}-next">{{ f[key ~ '-next'] }}</span></div>
      </div>
    {% endfor %}
  </main>
  {% endif %}
</body>
</html>
"""
