"""WSGI entry point: `flask --app app run`."""

from src.staff_checkin.staff_checkin.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG")))
