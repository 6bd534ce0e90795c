"""Forms for the admin blueprint."""

from flask_wtf import FlaskForm  # type: ignore
from wtforms import StringField, SubmitField, TextAreaField
from wtforms.validators import Optional


class ContentForm(FlaskForm):
    """Draft of the tournament content.

    Match names and scores are rendered as plain inputs next to this form
    because their number follows the tournament document.
    """

    top_scorers = TextAreaField(
        "Goleadores (Formato: nombre,goles;)", validators=[Optional()]
    )
    least_beaten_keepers = TextAreaField(
        "Valla Menos Vencida (Formato: nombre,goles_en_contra;)",
        validators=[Optional()],
    )
    latest_news = TextAreaField("Última Noticia", validators=[Optional()])
    live_stream_url = StringField(
        "URL de Transmisión en Vivo (iframe)", validators=[Optional()]
    )
    submit = SubmitField("Guardar Cambios")
