import enum


class BookingStatus(str, enum.Enum):
    """Document status of a booking request (carrier status codes)."""
    RECEIVED = "RECE"
    PENDING_UPDATE = "PENU"
    PENDING_CONFIRMATION = "PENC"
    CONFIRMED = "CONF"
    CANCELLED = "CANC"


class ReceiptDeliveryType(str, enum.Enum):
    CY = "CY"    # container yard
    SD = "SD"    # store door
    CFS = "CFS"  # container freight station


class CargoMovementType(str, enum.Enum):
    FCL = "FCL"
    LCL = "LCL"
    BB = "BB"


class WeightUnit(str, enum.Enum):
    KGM = "KGM"
    LBR = "LBR"


class CommunicationChannel(str, enum.Enum):
    EI = "EI"  # EDI
    EM = "EM"  # email
    AO = "AO"  # API


class PaymentTerm(str, enum.Enum):
    PRE = "PRE"
    COL = "COL"


class TransportDocumentType(str, enum.Enum):
    BOL = "BOL"
    SWB = "SWB"


class EventClassifier(str, enum.Enum):
    PLANNED = "PLN"
    ESTIMATED = "EST"
    ACTUAL = "ACT"


class DocumentType(str, enum.Enum):
    CARRIER_BOOKING_REQUEST = "CBR"
    BOOKING = "BKG"
    SHIPPING_INSTRUCTION = "SHI"
    TRANSPORT_DOCUMENT = "TRD"


class TransportEventType(str, enum.Enum):
    ARRIVAL = "ARRI"
    DEPARTURE = "DEPA"


class TransportPlanStage(str, enum.Enum):
    PRE_CARRIAGE = "PRC"
    MAIN_CARRIAGE = "MNC"
    ON_CARRIAGE = "ONC"
