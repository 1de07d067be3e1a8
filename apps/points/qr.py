"""
QR payload codec.

A QR code shown by the web app carries one of two compact JSON objects::

    {"type":"user","userId":<int>,"utorid":<str>}
    {"type":"redemption","requestId":<int>,"amount":<int>}

``encode`` is deterministic: same fields, same text. ``decode`` never raises;
anything that is not exactly one of the two shapes comes back as a
``DecodeError`` value so callers can treat it as "no recognised entity".
"""
import base64
import json
from dataclasses import dataclass
from io import BytesIO

import qrcode

TYPE_USER = 'user'
TYPE_REDEMPTION = 'redemption'

# Both payload shapes fit comfortably; anything longer is not ours
QR_PAYLOAD_MAX_LENGTH = 512


@dataclass(frozen=True)
class UserPayload:
    user_id: int
    utorid: str

    def to_dict(self):
        return {'type': TYPE_USER, 'userId': self.user_id, 'utorid': self.utorid}


@dataclass(frozen=True)
class RedemptionPayload:
    request_id: int
    amount: int

    def to_dict(self):
        return {'type': TYPE_REDEMPTION, 'requestId': self.request_id, 'amount': self.amount}


@dataclass(frozen=True)
class DecodeError:
    reason: str


def payload_for(entity):
    """Build the payload that identifies a member or a redemption request"""
    if isinstance(entity, (UserPayload, RedemptionPayload)):
        return entity

    # Imported lazily so the codec stays usable without the app registry
    from django.contrib.auth import get_user_model
    from .models import RedemptionRequest

    if isinstance(entity, get_user_model()):
        return UserPayload(user_id=entity.pk, utorid=entity.username)
    if isinstance(entity, RedemptionRequest):
        return RedemptionPayload(request_id=entity.pk, amount=entity.amount)
    raise TypeError(f"Cannot build a QR payload for {type(entity).__name__}")


def encode(entity):
    """Encode a User, RedemptionRequest or payload object to QR text"""
    payload = payload_for(entity)
    return json.dumps(payload.to_dict(), separators=(',', ':'), ensure_ascii=False)


def _is_int(value):
    # bool is an int subclass, but true/false is never an id or amount
    return isinstance(value, int) and not isinstance(value, bool)


def decode(text):
    """Decode QR text into a UserPayload, RedemptionPayload or DecodeError"""
    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError:
            return DecodeError('payload is not valid UTF-8')
    if not isinstance(text, str):
        return DecodeError('payload must be text')
    if len(text) > QR_PAYLOAD_MAX_LENGTH:
        return DecodeError(f"payload is longer than {QR_PAYLOAD_MAX_LENGTH} characters")

    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return DecodeError('payload is not valid JSON')

    if not isinstance(data, dict):
        return DecodeError('payload must be a JSON object')

    kind = data.get('type')
    if kind == TYPE_USER:
        user_id = data.get('userId')
        utorid = data.get('utorid')
        if not _is_int(user_id):
            return DecodeError('user payload requires an integer userId')
        if not isinstance(utorid, str):
            return DecodeError('user payload requires a string utorid')
        return UserPayload(user_id=user_id, utorid=utorid)

    if kind == TYPE_REDEMPTION:
        request_id = data.get('requestId')
        amount = data.get('amount')
        if not _is_int(request_id):
            return DecodeError('redemption payload requires an integer requestId')
        if not _is_int(amount):
            return DecodeError('redemption payload requires an integer amount')
        return RedemptionPayload(request_id=request_id, amount=amount)

    return DecodeError(f"unknown payload type: {kind!r}")


def render_png_data_url(text):
    """Render QR text as a PNG data URL"""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(text)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return f"data:image/png;base64,{base64.b64encode(buffer.getvalue()).decode()}"
