from flask import render_template, url_for

from . import bp

API_BASE = "/api/v1"


@bp.get("/")
def loans_page():
    return render_template(
        "loans.html",
        api_url=API_BASE,
        app_js=url_for("static", filename="js/app.js"),
    )
