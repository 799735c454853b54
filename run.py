from dotenv import load_dotenv

load_dotenv()

from library_loans import check_database, create_app  # noqa: E402

app = create_app()


if __name__ == "__main__":
    port = app.config["PORT"]
    app.logger.info("Server is running on port %s", port)
    check_database(app)
    app.run(host="0.0.0.0", port=port)
