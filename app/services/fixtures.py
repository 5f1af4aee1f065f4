"""Datos de demostración: factura de ejemplo, guion del chat y bitácora."""

from typing import Dict, List, Optional, Tuple

from app.schemas.chat_message import ChatMessage, MessageData, MessageType
from app.schemas.invoice import (
    AIRecommendation,
    AuditEntry,
    ClassificationResult,
    ERPResult,
    InvoiceData,
    InvoiceLineItem,
    InvoiceStatus,
    ValidationCheck,
    ValidationResult,
)

DEMO_CONVERSATION_ID = "conv-1"
DEFAULT_PROCESSING_TEXT = "Procesando..."
DEFAULT_REVEAL_DELAY_MS = 1000

DEMO_INVOICE = InvoiceData(
    id="inv-001",
    folio="A-4521",
    issuer="Tecnologías Avanzadas S.A. de C.V.",
    receiver="AGC Corporativo S.A. de C.V.",
    issuer_rfc="TAV200315KJ8",
    receiver_rfc="AGC180901LP4",
    date="2026-02-20",
    subtotal=45800.0,
    tax=7328.0,
    total=53128.0,
    currency="MXN",
    uuid="6ba7b810-9dad-11d1-80b4-00c04fd430c8",
    voucher_type="Ingreso",
    status=InvoiceStatus.RECEIVED,
    line_items=[
        InvoiceLineItem(
            description="Servicio de consultoría tecnológica",
            quantity=1,
            unit_value=35000.0,
            amount=35000.0,
        ),
        InvoiceLineItem(
            description="Licencias de software empresarial",
            quantity=3,
            unit_value=3600.0,
            amount=10800.0,
        ),
    ],
)

DEMO_VALIDATION = ValidationResult(
    is_valid=True,
    checks=[
        ValidationCheck(name="Estructura XML", passed=True, detail="Formato CFDI 4.0 válido"),
        ValidationCheck(name="Sello Digital", passed=True, detail="Firma del emisor verificada"),
        ValidationCheck(name="RFC Emisor", passed=True, detail="RFC activo en lista del SAT"),
        ValidationCheck(name="RFC Receptor", passed=True, detail="Coincide con razón social"),
        ValidationCheck(name="UUID SAT", passed=True, detail="Folio fiscal verificado"),
        ValidationCheck(name="Cálculos Fiscales", passed=True, detail="IVA y subtotal correctos"),
    ],
    score=98,
)

DEMO_CLASSIFICATION = ClassificationResult(
    account="6100-001-003",
    account_description="Gastos de consultoría y servicios profesionales",
    cost_center="CC-TI-2026",
    category="Servicios Profesionales",
    confidence=94,
)

DEMO_RECOMMENDATION = AIRecommendation(
    action="aprobar",
    confidence=96,
    reasoning=(
        "La factura cumple con todas las validaciones fiscales. El proveedor tiene historial "
        "positivo (12 transacciones previas). El monto está dentro del presupuesto autorizado "
        "para el centro de costo CC-TI-2026. Se recomienda aprobar y enviar al ERP."
    ),
    flags=["Monto superior a $50,000"],
)

DEMO_ERP_RESULT = ERPResult(
    success=True,
    erp_id="ERP-2026-04521",
    timestamp="2026-02-24T14:32:15Z",
    module="Cuentas por Pagar",
    message="Factura registrada exitosamente en el módulo de Cuentas por Pagar.",
)

# Estado de la factura tras revelar cada mensaje del guion (None = sin cambio)
STATUS_PROGRESSION: List[Optional[InvoiceStatus]] = [
    None,                           # bienvenida
    None,                           # el usuario pide procesar
    None,                           # el bot pide el XML
    InvoiceStatus.RECEIVED,         # archivo adjunto
    InvoiceStatus.VALIDATING,
    InvoiceStatus.VALIDATED,
    InvoiceStatus.CLASSIFIED,
    InvoiceStatus.APPROVED,
    None,                           # el usuario aprueba
    InvoiceStatus.SENDING_TO_ERP,
    InvoiceStatus.SENT_TO_ERP,
    InvoiceStatus.SENT_TO_ERP,
]

PROCESSING_TEXTS: Dict[int, str] = {
    2: "Analizando solicitud...",
    4: "Procesando factura...",
    5: "Validando factura con SAT...",
    6: "Clasificando contablemente...",
    7: "Generando recomendación IA...",
    9: "Enviando al ERP...",
    10: "Confirmando registro...",
    11: "Generando resumen...",
}

# Índice del guion en el que cada resultado pasa al panel de contexto
VALIDATION_STEP = 5
CLASSIFICATION_STEP = 6
RECOMMENDATION_STEP = 7
ERP_STEP = 10

_DEMO_DELAYS = [0, 800, 600, 1200, 1500, 2500, 2000, 2200, 800, 1500, 3000, 1000]


def get_demo_messages() -> Tuple[List[ChatMessage], List[int]]:
    """Guion del flujo de demostración y el retardo (ms) de cada mensaje."""
    messages = [
        ChatMessage(
            id="msg-1",
            sender="bot",
            content=(
                "Bienvenido a AGC-WARE. Soy tu Copilot Contable Empresarial. Puedo ayudarte a "
                "procesar, validar y clasificar facturas electrónicas usando inteligencia "
                "artificial. Adjunta un archivo XML para comenzar, o escríbeme lo que necesitas."
            ),
            timestamp="14:25",
        ),
        ChatMessage(
            id="msg-2",
            sender="user",
            content="Necesito procesar una factura nueva de Tecnologías Avanzadas.",
            timestamp="14:26",
        ),
        ChatMessage(
            id="msg-3",
            sender="bot",
            content="Perfecto, adjunta el archivo XML de la factura y comenzaré el procesamiento automático.",
            timestamp="14:26",
        ),
        ChatMessage(
            id="msg-4",
            sender="user",
            type=MessageType.FILE_UPLOAD,
            content="He adjuntado la factura.",
            timestamp="14:27",
            data=MessageData(file_name="factura_TAV_A4521.xml"),
        ),
        ChatMessage(
            id="msg-5",
            sender="bot",
            type=MessageType.STATUS_UPDATE,
            content="Factura recibida correctamente. Iniciando proceso de validación...",
            timestamp="14:27",
            data=MessageData(status=InvoiceStatus.RECEIVED),
        ),
        ChatMessage(
            id="msg-6",
            sender="bot",
            type=MessageType.VALIDATION_RESULT,
            content="La validación ha finalizado. Todos los controles fiscales pasaron exitosamente.",
            timestamp="14:28",
            data=MessageData(validation=DEMO_VALIDATION),
        ),
        ChatMessage(
            id="msg-7",
            sender="bot",
            type=MessageType.CLASSIFICATION_RESULT,
            content=(
                "He clasificado la factura automáticamente basándome en el historial contable "
                "y los conceptos facturados."
            ),
            timestamp="14:28",
            data=MessageData(classification=DEMO_CLASSIFICATION),
        ),
        ChatMessage(
            id="msg-8",
            sender="bot",
            type=MessageType.AI_RECOMMENDATION,
            content="Basándome en el análisis completo, esta es mi recomendación:",
            timestamp="14:29",
            data=MessageData(recommendation=DEMO_RECOMMENDATION),
        ),
        ChatMessage(
            id="msg-9",
            sender="user",
            content="Aprobado. Enviar al ERP.",
            timestamp="14:30",
        ),
        ChatMessage(
            id="msg-10",
            sender="bot",
            type=MessageType.STATUS_UPDATE,
            content="Enviando factura al ERP...",
            timestamp="14:30",
            data=MessageData(status=InvoiceStatus.SENDING_TO_ERP),
        ),
        ChatMessage(
            id="msg-11",
            sender="bot",
            type=MessageType.ERP_RESULT,
            content="La factura ha sido enviada y registrada exitosamente en el ERP.",
            timestamp="14:32",
            data=MessageData(erp=DEMO_ERP_RESULT),
        ),
        ChatMessage(
            id="msg-12",
            sender="bot",
            content=(
                "Proceso completado. La factura A-4521 de Tecnologías Avanzadas ha sido procesada, "
                "validada, clasificada y enviada al ERP exitosamente. Puedes ver el detalle completo "
                "en el panel de contexto. ¿Necesitas procesar otra factura?"
            ),
            timestamp="14:32",
        ),
    ]
    return messages, list(_DEMO_DELAYS)


_AUDIT_ENTRIES = [
    AuditEntry(
        id="aud-1", timestamp="14:27", action="Factura Recibida",
        detail="XML cargado: factura_TAV_A4521.xml", user="Sistema", status="info",
    ),
    AuditEntry(
        id="aud-2", timestamp="14:28", action="Validación Completa",
        detail="6/6 controles aprobados - Score: 98%", user="Motor IA", status="success",
    ),
    AuditEntry(
        id="aud-3", timestamp="14:28", action="Clasificación Automática",
        detail="Cuenta 6100-001-003 - Confianza: 94%", user="Motor IA", status="success",
    ),
    AuditEntry(
        id="aud-4", timestamp="14:29", action="Recomendación IA",
        detail="Acción: Aprobar - Confianza: 96%", user="Motor IA", status="success",
    ),
    AuditEntry(
        id="aud-5", timestamp="14:29", action="Alerta",
        detail="Monto superior a $50,000 MXN", user="Motor IA", status="warning",
    ),
    AuditEntry(
        id="aud-6", timestamp="14:30", action="Aprobación Manual",
        detail="Factura aprobada por usuario", user="Admin", status="success",
    ),
    AuditEntry(
        id="aud-7", timestamp="14:32", action="Enviada a ERP",
        detail="ID: ERP-2026-04521 - Cuentas por Pagar", user="Sistema", status="success",
    ),
]

# Número de entradas visibles por paso; los pasos posteriores usan el último valor
_AUDIT_STEP_COUNTS = [0, 1, 2, 3, 5, 5, 6, 7]


def get_demo_audit_log(step: int) -> List[AuditEntry]:
    count = _AUDIT_STEP_COUNTS[max(0, min(step, len(_AUDIT_STEP_COUNTS) - 1))]
    return list(_AUDIT_ENTRIES[:count])


# Historial que muestra la barra lateral al arrancar
DEMO_CONVERSATIONS = [
    {"id": DEMO_CONVERSATION_ID, "title": "Factura TAV A-4521", "date": "Hoy, 14:25", "is_demo": True},
    {"id": "conv-2", "title": "Lote facturas Feb 2026", "date": "Ayer, 09:15"},
    {"id": "conv-3", "title": "Corrección RFC emisor", "date": "22 Feb, 16:30"},
    {"id": "conv-4", "title": "Factura rechazada #3891", "date": "21 Feb, 11:00"},
    {"id": "conv-5", "title": "Consulta clasificación", "date": "20 Feb, 08:45"},
]
