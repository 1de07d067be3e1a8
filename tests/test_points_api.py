"""
API tests for the points endpoints.
"""
import pytest
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from apps.points import qr
from apps.points.models import RedemptionRequest
from apps.points.services import LedgerService, RedemptionService
from tests.factories import UserFactory, CashierFactory, ManagerFactory, fund


class PointsAPITestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.member = UserFactory()
        self.cashier = CashierFactory()
        self.manager = ManagerFactory()
        fund(self.member, 100)


class TestBalanceAndHistory(PointsAPITestCase):

    def test_requires_authentication(self):
        response = self.client.get(reverse('points:balance'))
        self.assertEqual(response.status_code, 401)

    def test_balance(self):
        self.client.force_authenticate(user=self.member)
        response = self.client.get(reverse('points:balance'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['code'], 200)
        self.assertEqual(response.data['data']['points'], 100)
        self.assertEqual(response.data['data']['utorid'], self.member.username)

    def test_own_history_newest_first(self):
        LedgerService.award(self.member.pk, 5, self.cashier, note='late')
        self.client.force_authenticate(user=self.member)
        response = self.client.get(reverse('points:transactions'))
        results = response.data['data']['results']
        self.assertEqual(response.data['data']['count'], 2)
        self.assertEqual([row['amount'] for row in results], [5, 100])

    def test_all_transactions_is_manager_only(self):
        self.client.force_authenticate(user=self.cashier)
        self.assertEqual(self.client.get(reverse('points:all_transactions')).status_code, 403)

        self.client.force_authenticate(user=self.manager)
        response = self.client.get(reverse('points:all_transactions'), {'utorid': self.member.username})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['count'], 1)
        self.assertEqual(response.data['data']['results'][0]['utorid'], self.member.username)


class TestAwardAndAdjust(PointsAPITestCase):

    def test_cashier_awards(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(
            reverse('points:award'), {'userId': self.member.pk, 'amount': 20, 'note': 'bonus'}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['data']['amount'], 20)
        self.assertEqual(response.data['data']['created_by'], self.cashier.username)
        self.assertEqual(LedgerService.get_balance(self.member.pk), 120)

    def test_regular_member_cannot_award(self):
        self.client.force_authenticate(user=UserFactory())
        response = self.client.post(
            reverse('points:award'), {'userId': self.member.pk, 'amount': 20}, format='json'
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(LedgerService.get_balance(self.member.pk), 100)

    def test_invalid_amount_error_code(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(
            reverse('points:award'), {'userId': self.member.pk, 'amount': 0}, format='json'
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'invalid_amount')

    def test_unknown_member(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(reverse('points:award'), {'userId': 987654, 'amount': 5}, format='json')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['error'], 'member_not_found')

    def test_manager_adjusts_down(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post(
            reverse('points:adjust'), {'userId': self.member.pk, 'amount': -30}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(LedgerService.get_balance(self.member.pk), 70)

    def test_overdrawing_adjustment(self):
        self.client.force_authenticate(user=self.manager)
        response = self.client.post(
            reverse('points:adjust'), {'userId': self.member.pk, 'amount': -500}, format='json'
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'insufficient_balance')


class TestRedemptionEndpoints(PointsAPITestCase):

    def test_create_and_list(self):
        self.client.force_authenticate(user=self.member)
        response = self.client.post(
            reverse('points:redemptions'), {'amount': 50, 'remark': 'mug'}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        data = response.data['data']
        self.assertEqual(data['status'], 'pending')
        self.assertEqual(qr.decode(data['qr_payload']), qr.RedemptionPayload(request_id=data['id'], amount=50))

        response = self.client.get(reverse('points:redemptions'))
        self.assertEqual(response.data['data']['count'], 1)

    def test_unverified_member_is_refused(self):
        unverified = UserFactory(verified=False)
        self.client.force_authenticate(user=unverified)
        response = self.client.post(reverse('points:redemptions'), {'amount': 10}, format='json')
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.data['error'], 'not_verified')

    def test_create_more_than_balance(self):
        self.client.force_authenticate(user=self.member)
        response = self.client.post(reverse('points:redemptions'), {'amount': 101}, format='json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'insufficient_balance')

    def test_process_twice(self):
        redemption = RedemptionService.create_request(self.member, 50)
        url = reverse('points:process_redemption', args=[redemption.pk])
        self.client.force_authenticate(user=self.cashier)

        response = self.client.post(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['amount'], -50)
        self.assertEqual(response.data['data']['redemption_id'], redemption.pk)

        response = self.client.post(url)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data['error'], 'invalid_state')
        self.assertEqual(LedgerService.get_balance(self.member.pk), 50)

    def test_member_cannot_process(self):
        redemption = RedemptionService.create_request(self.member, 50)
        self.client.force_authenticate(user=self.member)
        response = self.client.post(reverse('points:process_redemption', args=[redemption.pk]))
        self.assertEqual(response.status_code, 403)

    def test_pending_queue(self):
        RedemptionService.create_request(self.member, 10)
        self.client.force_authenticate(user=self.cashier)
        response = self.client.get(reverse('points:pending_redemptions'))
        self.assertEqual(response.data['data']['count'], 1)

    def test_other_members_request_is_hidden(self):
        redemption = RedemptionService.create_request(self.member, 10)
        self.client.force_authenticate(user=UserFactory())
        response = self.client.get(reverse('points:redemption_detail', args=[redemption.pk]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data['error'], 'request_not_found')

    def test_qr_code_only_while_pending(self):
        redemption = RedemptionService.create_request(self.member, 10)
        url = reverse('points:redemption_qr', args=[redemption.pk])
        self.client.force_authenticate(user=self.member)

        response = self.client.get(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['payload'], qr.encode(redemption))
        self.assertTrue(response.data['data']['image'].startswith('data:image/png;base64,'))

        RedemptionService.process_request(redemption.pk, self.cashier)
        self.assertEqual(self.client.get(url).status_code, 409)

    def test_owner_cancels(self):
        redemption = RedemptionService.create_request(self.member, 10)
        self.client.force_authenticate(user=self.member)
        response = self.client.post(reverse('points:cancel_redemption', args=[redemption.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data['data']['status'], RedemptionRequest.STATUS_CANCELLED)
        self.assertIsNone(response.data['data']['qr_payload'])


class TestScanEndpoints(PointsAPITestCase):

    def test_scan_user_qr(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(
            reverse('points:scan'), {'payload': qr.encode(self.member), 'amount': 15}, format='json'
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['msg'], 'Points awarded successfully!')
        self.assertEqual(response.data['data']['kind'], 'award')
        self.assertEqual(LedgerService.get_balance(self.member.pk), 115)

    def test_scan_redemption_qr(self):
        redemption = RedemptionService.create_request(self.member, 60)
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(reverse('points:scan'), {'payload': qr.encode(redemption)}, format='json')
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data['msg'], 'Redemption processed successfully!')
        self.assertEqual(LedgerService.get_balance(self.member.pk), 40)

    def test_scan_garbage(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(reverse('points:scan'), {'payload': '{not json'}, format='json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data['error'], 'decode_error')

    def test_preview(self):
        self.client.force_authenticate(user=self.cashier)
        response = self.client.post(
            reverse('points:scan_preview'), {'payload': qr.encode(self.member)}, format='json'
        )
        self.assertTrue(response.data['data']['recognized'])

        response = self.client.post(reverse('points:scan_preview'), {'payload': ''}, format='json')
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.data['data']['recognized'])

    def test_overlong_payload_is_rejected(self):
        self.client.force_authenticate(user=self.cashier)
        payload = '[' * (qr.QR_PAYLOAD_MAX_LENGTH + 88)
        for name in ('points:scan', 'points:scan_preview'):
            with self.subTest(endpoint=name):
                response = self.client.post(reverse(name), {'payload': payload}, format='json')
                self.assertEqual(response.status_code, 400)
        self.assertEqual(LedgerService.get_balance(self.member.pk), 100)


@pytest.mark.django_db
def test_award_then_redeem_over_http(api_client, member, cashier, manager):
    api_client.force_authenticate(user=cashier)
    api_client.post(reverse('points:award'), {'userId': member.pk, 'amount': 50}, format='json')

    api_client.force_authenticate(user=member)
    created = api_client.post(reverse('points:redemptions'), {'amount': 30}, format='json').data['data']

    api_client.force_authenticate(user=cashier)
    response = api_client.post(reverse('points:scan'), {'payload': created['qr_payload']}, format='json')
    assert response.status_code == 201

    api_client.force_authenticate(user=manager)
    response = api_client.get(reverse('points:all_transactions'), {'utorid': member.username})
    assert [row['amount'] for row in response.data['data']['results']] == [-30, 50]
    assert LedgerService.get_balance(member.pk) == 20
