"""Jinja2 templates shared by the HTML routers"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from training_signup.services.csv_export import yes_no
from training_signup.utils.date_format import format_date_br, format_datetime_br

# Get template directory relative to this file
template_dir = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(template_dir))

templates.env.filters["date_br"] = format_date_br
templates.env.filters["datetime_br"] = format_datetime_br
templates.env.filters["yes_no"] = yes_no
