"""Forms for the bets blueprint."""

from flask_wtf import FlaskForm  # type: ignore
from wtforms import RadioField, SelectField, SubmitField, ValidationError
from wtforms.validators import DataRequired

from torneo.constants import BET_STAKE_POINTS, MATCH_SEPARATOR


class BetForm(FlaskForm):
    """Form for predicting the winner of a group match."""

    match = SelectField(
        "Selecciona un Partido:",
        validators=[DataRequired(message="Por favor, selecciona un partido.")],
        validate_choice=True,
    )
    winner = RadioField(
        "Elige el Ganador:",
        validators=[DataRequired(message="Por favor, selecciona un ganador.")],
        validate_choice=False,
    )
    submit = SubmitField(f"Apostar {BET_STAKE_POINTS} Puntos")

    def set_match_choices(self, choices):
        """Populate the match select and the winner radios for the chosen match."""
        self.match.choices = [("", "-- Elige un partido --")] + list(choices)
        teams = (self.match.data or "").split(MATCH_SEPARATOR)
        if len(teams) == 2:
            self.winner.choices = [(team, team) for team in teams]
        else:
            self.winner.choices = []

    def validate_winner(self, field):
        """The predicted winner must be one of the two teams of the match."""
        teams = (self.match.data or "").split(MATCH_SEPARATOR)
        if field.data not in teams:
            raise ValidationError("Por favor, selecciona un partido y un ganador.")
