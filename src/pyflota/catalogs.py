"""Fixed domain catalogs and the resolvers that index into them.

Catalogs are bundled in the frozen :class:`Catalogs` dataclass and passed
explicitly (usually via :class:`pyflota.config.FlotaConfig`), so tests can
substitute small fixtures.  :data:`DEFAULT_CATALOGS` holds the shipped
data for the Guadalajara deployment.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import TypeVar

from pyflota._constants import (
    ADDRESS_PROBABILITY,
    OFFSET_GEOFENCE,
    OFFSET_LOCATION_KIND,
    OFFSET_NEIGHBORHOOD,
    OFFSET_STREET,
    OFFSET_STREET_NUMBER,
    STREET_NUMBER_MAX,
    STREET_NUMBER_MIN,
)
from pyflota.exceptions import FlotaCatalogError
from pyflota.models.event import EventTemplate, Severity
from pyflota.models.location import Location, LocationKind
from pyflota.seeding import random_int, scalar, scalar_index

T = TypeVar("T")


def _template(name: str, severity: Severity) -> EventTemplate:
    return EventTemplate(name=name, severity=severity)


EVENT_TEMPLATES: tuple[EventTemplate, ...] = (
    _template("Límite de velocidad excedido", Severity.ALTA),
    _template("Botón de pánico activado", Severity.ALTA),
    _template("Parada abrupta detectada", Severity.INFORMATIVA),
    _template("Desconexión de batería", Severity.ALTA),
    _template("Frenazo de emergencia", Severity.ALTA),
    _template("Exceso de velocidad", Severity.MEDIA),
    _template("Colisión inminente", Severity.MEDIA),
    _template("Error del conductor", Severity.MEDIA),
    _template("Desprendimiento detectado", Severity.MEDIA),
    _template("Obstrucción en la vía", Severity.BAJA),
    _template("Pérdida de control", Severity.INFORMATIVA),
    _template("Distracción al volante", Severity.BAJA),
    _template("Fallo en los frenos", Severity.ALTA),
    _template("Cambio brusco de carril", Severity.MEDIA),
    _template("Batería baja", Severity.BAJA),
    _template("Acceso no autorizado", Severity.ALTA),
    _template("Mantenimiento programado", Severity.INFORMATIVA),
    _template("Temperatura elevada del motor", Severity.MEDIA),
    _template("Puerta abierta durante tránsito", Severity.BAJA),
    _template("Sistema actualizado", Severity.INFORMATIVA),
    _template("Señal GPS débil", Severity.BAJA),
    _template("Cinturón de seguridad sin abrochar", Severity.MEDIA),
    _template("Presión de neumáticos baja", Severity.BAJA),
    _template("Entrada a zona restringida", Severity.ALTA),
    _template("Ralentí prolongado", Severity.INFORMATIVA),
)

# Same order as EVENT_TEMPLATES.
INSTRUCTIONS: tuple[str, ...] = (
    "Contactar al conductor de inmediato. Verificar cumplimiento de límites de velocidad en la zona. "
    "Revisar historial de eventos similares.",
    "Prioridad máxima: contactar al conductor inmediatamente. Verificar ubicación actual. "
    "Coordinar con servicios de emergencia si es necesario.",
    "Revisar contexto de la parada. Verificar si fue una maniobra normal o si requiere seguimiento. "
    "Documentar en bitácora.",
    "Contactar al conductor para verificar estado del vehículo. Coordinar revisión técnica inmediata. "
    "Asegurar que no sea un intento de sabotaje.",
    "Contactar al conductor para verificar su estado y el del vehículo. Documentar las causas del frenazo. "
    "Revisar necesidad de revisión mecánica.",
    "Notificar al conductor sobre el exceso de velocidad. Documentar la incidencia. "
    "Revisar si es un patrón recurrente.",
    "Contactar inmediatamente al conductor. Verificar si ocurrió algún incidente. "
    "Documentar las circunstancias y condiciones del camino.",
    "Revisar detalles del error detectado. Programar sesión de capacitación si es necesario. "
    "Documentar para evaluación de desempeño.",
    "Contactar al conductor para verificar carga y estado del vehículo. Detener operaciones hasta confirmar "
    "seguridad. Coordinar inspección.",
    "Verificar la naturaleza de la obstrucción con el conductor. Evaluar necesidad de reportar a autoridades. "
    "Documentar ubicación exacta.",
    "Contactar al conductor para verificar su estado. Revisar condiciones climáticas y del camino. "
    "Documentar incidente.",
    "Enviar recordatorio al conductor sobre políticas de seguridad. Documentar incidente. "
    "Evaluar necesidad de capacitación.",
    "Detener operaciones inmediatamente. Contactar al conductor. Coordinar asistencia vial de emergencia. "
    "Programar reparación urgente.",
    "Verificar con conductor las razones de la maniobra. Revisar si fue por emergencia o conducción "
    "imprudente. Documentar.",
    "Notificar al conductor. Programar revisión y recarga/reemplazo de batería en próximo punto de "
    "mantenimiento.",
    "Verificar inmediatamente con conductor autorizado. Revisar sistema de seguridad. "
    "Coordinar con área de seguridad corporativa.",
    "Confirmar disponibilidad del vehículo para mantenimiento. Coordinar con taller. "
    "Notificar al conductor sobre horario.",
    "Solicitar al conductor que detenga el vehículo de forma segura. Verificar niveles de refrigerante. "
    "Coordinar asistencia técnica.",
    "Contactar al conductor inmediatamente para detener el vehículo. Verificar cierre correcto de todas "
    "las puertas antes de continuar.",
    "Verificar que la actualización se completó correctamente. Confirmar funcionalidad de todos los "
    "sistemas. Documentar versión instalada.",
    "Monitorear situación. Si persiste, verificar antena GPS y conexiones. Programar revisión técnica si "
    "el problema continúa.",
    "Enviar alerta inmediata al conductor. Verificar que todos los ocupantes usen cinturón. "
    "Aplicar política de seguridad.",
    "Notificar al conductor para revisar presión en próxima parada. Coordinar inflado de neumáticos. "
    "Verificar posibles fugas.",
    "Contactar al conductor inmediatamente. Verificar autorización de acceso. Documentar motivo de entrada. "
    "Coordinar salida si no está autorizado.",
    "Verificar con conductor motivo de ralentí. Recordar políticas de ahorro de combustible. "
    "Documentar si es tiempo de espera autorizado.",
)

TAGS: tuple[str, ...] = (
    "Walmart",
    "OXXO",
    "Soriana",
    "Costco",
    "Home Depot",
    "Liverpool",
    "Chedraui",
    "Sam's Club",
    "Bodega Aurrera",
    "Office Depot",
    "Best Buy",
    "Elektra",
    "Coppel",
    "Suburbia",
    "Sears",
    "Palacio de Hierro",
    "Sanborns",
    "7-Eleven",
    "Circle K",
    "Farmacias Guadalajara",
)

ASSIGNEES: tuple[str, ...] = (
    "juan.perez@email.com",
    "maria.garcia@email.com",
    "carlos.lopez@email.com",
    "ana.martinez@email.com",
    "luis.hernandez@email.com",
    "sofia.rodriguez@email.com",
    "diego.sanchez@email.com",
    "carmen.ramirez@email.com",
)

STREETS: tuple[str, ...] = (
    "Av. Chapultepec",
    "Av. Vallarta",
    "Anillo Perif. Nte. Manuel Gómez Morín",
    "Av. López Mateos",
    "Calz. Independencia",
    "Av. Américas",
    "Av. Mariano Otero",
    "Av. Patria",
    "Av. Lázaro Cárdenas",
    "Av. Niños Héroes",
    "Av. 16 de Septiembre",
    "Av. Alcalde",
    "Calz. del Federalismo",
    "Av. Enrique Díaz de León",
    "Av. México",
    "Av. Inglaterra",
    "Av. Francia",
    "Av. Aviación",
    "Av. Washington",
    "Av. Circunvalación",
)

NEIGHBORHOODS: tuple[str, ...] = (
    "Col. Americana",
    "Col. Providencia",
    "Col. Lafayette",
    "Col. Chapalita",
    "Col. Seattle",
    "Col. Jardines del Bosque",
    "Col. Lomas del Country",
    "Col. Colinas de San Javier",
    "Col. Vallarta Universidad",
    "Col. Ciudad del Sol",
    "Col. Arcos Vallarta",
    "Col. Vallarta Poniente",
    "Col. Monraz",
    "Col. Ladrón de Guevara",
    "Col. Santa Teresita",
)

GEOFENCES: tuple[str, ...] = (
    "CEDIS Norte",
    "CEDIS Sur",
    "CEDIS Poniente",
    "CEDIS Oriente",
    "CEDIS Central",
    "Bodega Principal",
    "Bodega Secundaria",
    "Bodega Tijuana",
    "Bodega Monterrey",
    "Central de Distribución GDL",
    "Central de Abastos",
    "Almacén General",
    "Almacén Temporal",
    "Centro de Acopio",
    "Punto de Entrega Norte",
    "Punto de Entrega Sur",
    "Base de Operaciones",
    "Zona de Carga",
    "Patio de Maniobras",
    "Terminal de Transferencia",
)


@dataclasses.dataclass(frozen=True)
class Catalogs:
    """Immutable bundle of every catalog the generators index into.

    Parameters
    ----------
    event_templates : tuple of EventTemplate
        Event names with their fixed severity.
    instructions : tuple of str
        Handling instructions, aligned by position with
        ``event_templates``.  When shorter, lookups wrap around.
    tags : tuple of str
        Customer / site tags.
    assignees : tuple of str
        Assignee email addresses.
    streets, neighborhoods : tuple of str
        Parts for synthesized street addresses.
    geofences : tuple of str
        Named geofences.
    """

    event_templates: tuple[EventTemplate, ...] = EVENT_TEMPLATES
    instructions: tuple[str, ...] = INSTRUCTIONS
    tags: tuple[str, ...] = TAGS
    assignees: tuple[str, ...] = ASSIGNEES
    streets: tuple[str, ...] = STREETS
    neighborhoods: tuple[str, ...] = NEIGHBORHOODS
    geofences: tuple[str, ...] = GEOFENCES

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            # Lists from callers are frozen into tuples.
            if not isinstance(value, tuple):
                value = tuple(value)
                object.__setattr__(self, field.name, value)
            if not value:
                raise FlotaCatalogError(f"catalog {field.name!r} must not be empty", field=field.name)

    def instructions_for(self, template_index: int) -> str:
        return self.instructions[template_index % len(self.instructions)]


DEFAULT_CATALOGS = Catalogs()


def resolve_from_catalog(catalog: Sequence[T], seed: float, offset: float = 0) -> T:
    """Return ``catalog[floor(scalar(seed, offset) * len(catalog))]``.

    *catalog* must be non-empty; :class:`Catalogs` guarantees this for the
    bundled catalogs.
    """
    return catalog[scalar_index(len(catalog), seed, offset)]


def format_address(seed: float, catalogs: Catalogs = DEFAULT_CATALOGS) -> Location:
    """Synthesize a street address location for *seed*."""
    street = resolve_from_catalog(catalogs.streets, seed, OFFSET_STREET)
    neighborhood = resolve_from_catalog(catalogs.neighborhoods, seed, OFFSET_NEIGHBORHOOD)
    number = random_int(seed, STREET_NUMBER_MIN, STREET_NUMBER_MAX, OFFSET_STREET_NUMBER)
    return Location(
        kind=LocationKind.ADDRESS,
        label=f"{street} {number}, {neighborhood}",
        street=street,
        number=number,
        neighborhood=neighborhood,
    )


def resolve_location(seed: float, catalogs: Catalogs = DEFAULT_CATALOGS) -> Location:
    """Pick a geofence (75%) or a street address (25%) for *seed*."""
    if scalar(seed, OFFSET_LOCATION_KIND) < ADDRESS_PROBABILITY:
        return format_address(seed, catalogs)
    name = resolve_from_catalog(catalogs.geofences, seed, OFFSET_GEOFENCE)
    return Location(kind=LocationKind.GEOFENCE, label=name)
