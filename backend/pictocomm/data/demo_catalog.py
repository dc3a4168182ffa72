"""Bundled system pictograms used when no store is configured."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pictocomm.core.models.category import Category
from pictocomm.core.models.pictogram import Pictogram

# Each entry: (id, category, text, image resource)
DEMO_PICTOGRAMS = [
    # People
    ("1", Category.PERSON, "Yo", "ic_person_yo"),
    ("2", Category.PERSON, "Tu", "ic_person_tu"),
    ("3", Category.PERSON, "El/Ella", "ic_person_el_ella"),
    ("4", Category.PERSON, "Nosotros", "ic_person_nosotros"),
    ("5", Category.PERSON, "Mama", "ic_person_mama"),
    ("6", Category.PERSON, "Papa", "ic_person_papa"),
    ("7", Category.PERSON, "Profesor/a", "ic_person_teacher"),
    ("8", Category.PERSON, "Amigo/a", "ic_person_friend"),
    # Actions
    ("9", Category.ACTION, "Quiero", "ic_action_want"),
    ("10", Category.ACTION, "Tengo", "ic_action_have"),
    ("11", Category.ACTION, "Necesito", "ic_action_need"),
    ("12", Category.ACTION, "Me gusta", "ic_action_like"),
    ("13", Category.ACTION, "Voy", "ic_action_go"),
    ("14", Category.ACTION, "Comer", "ic_action_eat"),
    ("15", Category.ACTION, "Beber", "ic_action_drink"),
    ("16", Category.ACTION, "Jugar", "ic_action_play"),
    ("17", Category.ACTION, "Dormir", "ic_action_sleep"),
    ("18", Category.ACTION, "Ir al bano", "ic_action_bathroom"),
    ("19", Category.ACTION, "Ver", "ic_action_watch"),
    ("20", Category.ACTION, "Escuchar", "ic_action_listen"),
    # Things
    ("21", Category.THING, "Helado", "ic_thing_ice_cream"),
    ("22", Category.THING, "Agua", "ic_thing_water"),
    ("23", Category.THING, "Comida", "ic_thing_food"),
    ("24", Category.THING, "Juguete", "ic_thing_toy"),
    ("25", Category.THING, "Libro", "ic_thing_book"),
    ("26", Category.THING, "Pelota", "ic_thing_ball"),
    ("27", Category.THING, "Television", "ic_thing_tv"),
    ("28", Category.THING, "Musica", "ic_thing_music"),
    ("29", Category.THING, "Tablet", "ic_thing_tablet"),
    ("30", Category.THING, "Galletas", "ic_thing_cookies"),
    # Qualities
    ("31", Category.QUALITY, "Hambre", "ic_quality_hungry"),
    ("32", Category.QUALITY, "Sed", "ic_quality_thirsty"),
    ("33", Category.QUALITY, "Sueno", "ic_quality_sleepy"),
    ("34", Category.QUALITY, "Feliz", "ic_quality_happy"),
    ("35", Category.QUALITY, "Triste", "ic_quality_sad"),
    ("36", Category.QUALITY, "Enojado/a", "ic_quality_angry"),
    ("37", Category.QUALITY, "Cansado/a", "ic_quality_tired"),
    ("38", Category.QUALITY, "Grande", "ic_quality_big"),
    ("39", Category.QUALITY, "Pequeno/a", "ic_quality_small"),
    # Places
    ("40", Category.PLACE, "Casa", "ic_place_home"),
    ("41", Category.PLACE, "Escuela", "ic_place_school"),
    ("42", Category.PLACE, "Parque", "ic_place_park"),
    ("43", Category.PLACE, "Hospital", "ic_place_hospital"),
    ("44", Category.PLACE, "Bano", "ic_place_bathroom"),
    ("45", Category.PLACE, "Cocina", "ic_place_kitchen"),
    ("46", Category.PLACE, "Habitacion", "ic_place_bedroom"),
    # Time
    ("47", Category.TIME, "Ahora", "ic_time_now"),
    ("48", Category.TIME, "Despues", "ic_time_later"),
    ("49", Category.TIME, "Manana", "ic_time_tomorrow"),
    ("50", Category.TIME, "Hoy", "ic_time_today"),
    ("51", Category.TIME, "Ayer", "ic_time_yesterday"),
]

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


def load_demo_catalog() -> list[Pictogram]:
    """Return fresh system pictograms, creation times spaced one second apart."""
    return [
        Pictogram(
            id=pictogram_id,
            text=text,
            category=category,
            image_resource=resource,
            created_at=_EPOCH + timedelta(seconds=index),
        )
        for index, (pictogram_id, category, text, resource) in enumerate(DEMO_PICTOGRAMS)
    ]
