"""Registered Formulario 29 codes, in recognition order.

Label patterns are regex fragments matched case-insensitively. Accented
letters are written as classes so that both "DÉBITO" and "DEBITO" match.
"""

from fiscal_ingest.recognition.models import CatalogueEntry

CATALOGUE: tuple[CatalogueEntry, ...] = (
    CatalogueEntry("062", "PPM neto determinado", r"PPM"),
    CatalogueEntry(
        "089",
        "IVA determinado",
        r"(?:IMP\.?[ \t]*DETERM\w*\.?[ \t]*IVA|IVA[ \t]*DETERMINADO)",
    ),
    CatalogueEntry("110", "Cantidad de boletas", r"BOLETAS"),
    CatalogueEntry("503", "Cantidad de facturas emitidas", r"FACTURAS[ \t]*EMITIDAS"),
    CatalogueEntry("511", "Crédito fiscal", r"CR[EÉ]D"),
    CatalogueEntry("519", "Cantidad de facturas recibidas", r"FACT\w*\.?.*?RECIB"),
    CatalogueEntry("538", "Débito fiscal", r"D[EÉ]BITO"),
    CatalogueEntry("547", "Total determinado", r"TOTAL[ \t]*DETERMINADO"),
    CatalogueEntry("562", "Compras sin derecho a crédito", r"SIN.*?DER"),
    CatalogueEntry("563", "Ventas netas", r"(?:VENTAS[ \t]*NETAS|BASE[ \t]*IMPONIBLE)"),
    CatalogueEntry("595", "Subtotal impuesto determinado", r"SUB[ \t]*TOTAL"),
)

CATALOGUE_CODES: frozenset[str] = frozenset(entry.code for entry in CATALOGUE)
