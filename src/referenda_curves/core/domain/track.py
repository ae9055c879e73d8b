"""
Track — Модель трека governance и параметров его кривых

Immutable Pydantic модели, совместимые с JSON Schema (core/contracts/schema/track_table.json).

Параметры кривых задаются в "человеческих" единицах (целые проценты, дни окна)
и превращаются в Curve методом build(). Перекрёстные инварианты (floor <= ceil
и т.п.) проверяются при build() и дают DomainError, чтобы ошибка одного трека
не блокировала остальные.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from referenda_curves.core.domain.curve import (
    Curve,
    make_linear,
    make_reciprocal,
    make_stepped,
)
from referenda_curves.core.math.fixed_point import FixedFraction, SignedFixed


# =============================================================================
# ПАРАМЕТРЫ КРИВЫХ
# =============================================================================


class LinearCurveParams(BaseModel):
    """Линейная кривая: от ceil до floor за length из period."""

    kind: Literal["linear"] = "linear"
    length: int = Field(..., gt=0, description="Длина спада (в единицах period)")
    period: int = Field(..., gt=0, description="Длина окна решения")
    floor: int = Field(..., ge=0, le=100, description="Нижний порог (%)")
    ceil: int = Field(..., ge=0, le=100, description="Верхний порог (%)")

    model_config = {"frozen": True}

    def build(self) -> Curve:
        return make_linear(
            self.length,
            self.period,
            SignedFixed.from_percent(self.floor),
            SignedFixed.from_percent(self.ceil),
        )


class ReciprocalCurveParams(BaseModel):
    """Reciprocal кривая: от ceil к floor, проходит через level в момент delay."""

    kind: Literal["reciprocal"] = "reciprocal"
    delay: int = Field(..., ge=0, description="Момент прохождения level (в единицах period)")
    period: int = Field(..., gt=0, description="Длина окна решения")
    level: int = Field(..., ge=0, le=100, description="Порог в момент delay (%)")
    floor: int = Field(..., ge=0, le=100, description="Асимптота (%)")
    ceil: int = Field(..., ge=0, le=100, description="Порог при x=0 (%)")

    model_config = {"frozen": True}

    def build(self) -> Curve:
        return make_reciprocal(
            self.delay,
            self.period,
            SignedFixed.from_percent(self.level),
            SignedFixed.from_percent(self.floor),
            SignedFixed.from_percent(self.ceil),
        )


class SteppedCurveParams(BaseModel):
    """Ступенчатая кривая: от begin вниз на step каждые period из decision, не ниже end."""

    kind: Literal["stepped"] = "stepped"
    period: int = Field(..., gt=0, description="Длина ступени")
    decision: int = Field(..., gt=0, description="Длина окна решения")
    begin: int = Field(..., ge=0, le=100, description="Начальный порог (%)")
    end: int = Field(..., ge=0, le=100, description="Минимальный порог (%)")
    step: int = Field(..., ge=0, le=100, description="Величина ступени (%)")

    model_config = {"frozen": True}

    def build(self) -> Curve:
        return make_stepped(
            self.period,
            self.decision,
            FixedFraction.from_percent(self.begin),
            FixedFraction.from_percent(self.end),
            FixedFraction.from_percent(self.step),
        )


CurveParams = Annotated[
    Union[LinearCurveParams, ReciprocalCurveParams, SteppedCurveParams],
    Field(discriminator="kind"),
]


# =============================================================================
# TRACK
# =============================================================================


class TrackInfo(BaseModel):
    """
    Трек governance (origin) с окном решения и кривыми approval / support.

    Все длительности — в блоках.
    """

    id: int = Field(..., ge=0, le=65535, description="Идентификатор трека")
    name: str = Field(..., min_length=1, description="Имя трека")
    max_deciding: int = Field(..., gt=0, description="Лимит одновременно решаемых референдумов")
    decision_deposit: int = Field(..., ge=0, description="Депозит для начала решения")
    prepare_period: int = Field(..., ge=0, description="Период подготовки (блоки)")
    decision_period: int = Field(..., gt=0, description="Окно решения (блоки)")
    confirm_period: int = Field(..., ge=0, description="Период подтверждения (блоки)")
    min_enactment_period: int = Field(..., ge=0, description="Минимальная задержка исполнения (блоки)")
    min_approval: CurveParams = Field(..., description="Кривая approval")
    min_support: CurveParams = Field(..., description="Кривая support")

    model_config = {"frozen": True}


class TrackTable(BaseModel):
    """Таблица треков одной сети."""

    network: str = Field(..., min_length=1, description="Имя сети")
    tracks: tuple[TrackInfo, ...] = Field(..., min_length=1, description="Треки")

    model_config = {"frozen": True}

    def get(self, track_id: int) -> TrackInfo:
        """
        Raises:
            KeyError: Если трека с таким id нет
        """
        for track in self.tracks:
            if track.id == track_id:
                return track
        raise KeyError(f"Unknown track id: {track_id}")
