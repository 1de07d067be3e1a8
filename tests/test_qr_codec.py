"""
Tests for the QR payload codec.
"""
import json
from unittest.mock import patch

import pytest
from django.test import SimpleTestCase, TestCase
from hypothesis import given, strategies as st

from apps.points import qr
from apps.points.services import RedemptionService
from tests.factories import UserFactory, fund


user_payloads = st.builds(
    qr.UserPayload,
    user_id=st.integers(min_value=1, max_value=2**53),
    utorid=st.text(min_size=1, max_size=20),
)
redemption_payloads = st.builds(
    qr.RedemptionPayload,
    request_id=st.integers(min_value=1, max_value=2**53),
    amount=st.integers(min_value=1, max_value=10**9),
)


class TestQRCodecProperties(SimpleTestCase):

    @given(payload=st.one_of(user_payloads, redemption_payloads))
    def test_decode_inverts_encode(self, payload):
        """
        Property: decoding an encoded payload gives back the same payload
        """
        self.assertEqual(qr.decode(qr.encode(payload)), payload)

    @given(text=st.text())
    def test_decode_never_raises(self, text):
        """
        Property: arbitrary text decodes to a payload or a DecodeError value
        """
        result = qr.decode(text)
        self.assertIsInstance(result, (qr.UserPayload, qr.RedemptionPayload, qr.DecodeError))


class TestQRCodecFormat(SimpleTestCase):

    def test_user_payload_wire_format(self):
        text = qr.encode(qr.UserPayload(user_id=7, utorid='smithj'))
        self.assertEqual(text, '{"type":"user","userId":7,"utorid":"smithj"}')

    def test_redemption_payload_wire_format(self):
        text = qr.encode(qr.RedemptionPayload(request_id=12, amount=50))
        self.assertEqual(text, '{"type":"redemption","requestId":12,"amount":50}')

    def test_encode_is_deterministic(self):
        payload = qr.RedemptionPayload(request_id=3, amount=9)
        self.assertEqual(qr.encode(payload), qr.encode(qr.RedemptionPayload(request_id=3, amount=9)))

    def test_malformed_json_is_decode_error(self):
        self.assertIsInstance(qr.decode('{not json'), qr.DecodeError)

    def test_unknown_type_is_decode_error(self):
        result = qr.decode('{"type":"bogus"}')
        self.assertIsInstance(result, qr.DecodeError)
        self.assertIn('bogus', result.reason)

    def test_non_object_json_is_decode_error(self):
        for text in ('[1, 2]', '"user"', '42', 'null'):
            with self.subTest(text=text):
                self.assertIsInstance(qr.decode(text), qr.DecodeError)

    def test_missing_or_mistyped_fields_are_decode_errors(self):
        cases = [
            {'type': 'user', 'utorid': 'smithj'},
            {'type': 'user', 'userId': '7', 'utorid': 'smithj'},
            {'type': 'user', 'userId': 7},
            {'type': 'user', 'userId': 7, 'utorid': 7},
            {'type': 'user', 'userId': True, 'utorid': 'smithj'},
            {'type': 'redemption', 'requestId': 1},
            {'type': 'redemption', 'requestId': 1, 'amount': 2.5},
            {'type': 'redemption', 'requestId': False, 'amount': 5},
        ]
        for data in cases:
            with self.subTest(data=data):
                self.assertIsInstance(qr.decode(json.dumps(data)), qr.DecodeError)

    def test_extra_keys_are_ignored(self):
        result = qr.decode('{"type":"redemption","requestId":4,"amount":20,"shop":"north"}')
        self.assertEqual(result, qr.RedemptionPayload(request_id=4, amount=20))

    def test_decode_accepts_utf8_bytes(self):
        result = qr.decode('{"type":"user","userId":1,"utorid":"zoë"}'.encode('utf-8'))
        self.assertEqual(result, qr.UserPayload(user_id=1, utorid='zoë'))

    def test_invalid_bytes_and_non_text_are_decode_errors(self):
        self.assertIsInstance(qr.decode(b'\xff\xfe'), qr.DecodeError)
        self.assertIsInstance(qr.decode(None), qr.DecodeError)
        self.assertIsInstance(qr.decode(12), qr.DecodeError)

    def test_deeply_nested_input_is_decode_error(self):
        self.assertIsInstance(qr.decode('[' * 200000), qr.DecodeError)
        self.assertIsInstance(qr.decode('{"a":' * 100000), qr.DecodeError)

    def test_overlong_payload_is_decode_error(self):
        padded = json.dumps({'type': 'user', 'userId': 1, 'utorid': 'x' * qr.QR_PAYLOAD_MAX_LENGTH})
        result = qr.decode(padded)
        self.assertIsInstance(result, qr.DecodeError)
        self.assertIn(str(qr.QR_PAYLOAD_MAX_LENGTH), result.reason)

    def test_parser_recursion_is_decode_error(self):
        with patch('apps.points.qr.json.loads', side_effect=RecursionError):
            self.assertIsInstance(qr.decode('[[1]]'), qr.DecodeError)

    def test_payload_for_rejects_unknown_entities(self):
        with pytest.raises(TypeError):
            qr.payload_for(object())

    def test_render_png_data_url(self):
        url = qr.render_png_data_url(qr.encode(qr.UserPayload(user_id=1, utorid='smithj')))
        self.assertTrue(url.startswith('data:image/png;base64,'))


class TestQRCodecModels(TestCase):

    def test_encode_user(self):
        user = UserFactory(username='smithj')
        self.assertEqual(qr.decode(qr.encode(user)), qr.UserPayload(user_id=user.pk, utorid='smithj'))

    def test_encode_redemption_request(self):
        member = UserFactory()
        fund(member, 100)
        redemption = RedemptionService.create_request(member, 40, remark='mug')
        self.assertEqual(
            qr.decode(qr.encode(redemption)),
            qr.RedemptionPayload(request_id=redemption.pk, amount=40),
        )
