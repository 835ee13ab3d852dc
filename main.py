"""Application entrypoint: builds the service and runs the Flask web app."""

from panchangam_view.config import Config  # App configuration
from panchangam_view.service import PanchangamService  # Report loader/renderer
from panchangam_view.web import create_app  # Flask app factory


def main() -> None:
    """Create the service and run the Flask development server."""
    service = PanchangamService()  # Reads Config.SOURCE on every page load
    print(f"[panchangam] Serving {service.source} on {Config.HOST}:{Config.PORT}", flush=True)
    app = create_app(service)  # Build Flask app bound to the service
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)


if __name__ == "__main__":
    main()
