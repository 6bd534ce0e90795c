"""Forms for the admin gate."""

from flask_wtf import FlaskForm  # type: ignore
from wtforms import PasswordField, SubmitField
from wtforms.validators import DataRequired


class AdminLoginForm(FlaskForm):
    """Admin login form."""

    password = PasswordField(
        "Contraseña",
        validators=[DataRequired()],
        render_kw={"autocomplete": "current-password", "placeholder": "Contraseña"},
    )
    submit = SubmitField("Iniciar Sesión")
