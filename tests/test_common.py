"""
Tests for notices, the manager dashboard, health check and balance reconciliation.
"""
import threading
import time
from datetime import timedelta
from io import StringIO
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import connection
from django.test import TestCase, TransactionTestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from apps.common.models import Notice
from apps.points.exceptions import InvalidAmount
from apps.points.services import LedgerService, RedemptionService
from tests.factories import UserFactory, CashierFactory, ManagerFactory, PromotionFactory, EventFactory, fund

User = get_user_model()


class TestLedgerNotices(TestCase):

    def setUp(self):
        self.member = UserFactory()
        self.cashier = CashierFactory()

    def test_award_posts_notices_after_commit(self):
        with self.captureOnCommitCallbacks(execute=True):
            LedgerService.award(self.member.pk, 20, self.cashier, note='bonus')

        notice = Notice.objects.get(user=self.cashier)
        self.assertEqual(notice.level, 'success')
        self.assertIn('Awarded 20 points', notice.message)
        self.assertTrue(Notice.objects.filter(user=self.member).exists())

    def test_failed_operation_posts_nothing(self):
        with self.captureOnCommitCallbacks(execute=True):
            with self.assertRaises(InvalidAmount):
                LedgerService.award(self.member.pk, 0, self.cashier)
        self.assertFalse(Notice.objects.exists())

    def test_own_action_posts_one_notice(self):
        fund(self.member, 50)
        with self.captureOnCommitCallbacks(execute=True):
            RedemptionService.create_request(self.member, 10)
        self.assertEqual(Notice.objects.filter(user=self.member).count(), 1)

    @override_settings(NOTICE_DISPLAY_SECONDS=3)
    def test_notice_expires(self):
        notice = Notice.post(self.member, 'Saved')
        self.assertFalse(notice.is_expired())
        self.assertTrue(notice.is_expired(now=notice.created_at + timedelta(seconds=4)))
        self.assertEqual(Notice.objects.visible(now=timezone.now() + timedelta(seconds=4)).count(), 0)

    def test_purge_expired(self):
        Notice.post(self.member, 'Old', seconds=0)
        Notice.post(self.member, 'Fresh', seconds=60)
        self.assertEqual(Notice.purge_expired(), 1)
        self.assertEqual(list(Notice.objects.values_list('message', flat=True)), ['Fresh'])

    def test_notice_endpoint_lists_visible_only(self):
        Notice.post(self.member, 'Old', seconds=0)
        Notice.post(self.member, 'Fresh', seconds=60)
        client = APIClient()
        client.force_authenticate(user=self.member)
        response = client.get(reverse('common:notices'))
        self.assertEqual([row['message'] for row in response.data['data']], ['Fresh'])


class TestPurgeNoticesCommand(TestCase):

    def setUp(self):
        self.member = UserFactory()
        self.other = UserFactory()
        Notice.post(self.member, 'Old', seconds=0)
        Notice.post(self.member, 'Fresh', seconds=60)
        Notice.post(self.other, 'Also old', seconds=0)

    def test_purges_expired_notices(self):
        out = StringIO()
        call_command('purge_notices', stdout=out)
        self.assertIn('Purged 2 expired notice(s)', out.getvalue())
        self.assertEqual(list(Notice.objects.values_list('message', flat=True)), ['Fresh'])

    def test_purges_one_user_only(self):
        out = StringIO()
        call_command('purge_notices', '--user-id', str(self.member.pk), stdout=out)
        self.assertIn('Purged 1 expired notice(s)', out.getvalue())
        self.assertTrue(Notice.objects.filter(user=self.other).exists())

    def test_unknown_user(self):
        with self.assertRaises(CommandError):
            call_command('purge_notices', '--user-id', '987654', stdout=StringIO())
        self.assertEqual(Notice.objects.count(), 3)


class TestDashboard(TestCase):

    def setUp(self):
        self.client = APIClient()

    def test_manager_dashboard_counts(self):
        manager = ManagerFactory()
        member = UserFactory()
        fund(member, 40)
        RedemptionService.create_request(member, 10)
        PromotionFactory(created_by=manager)
        EventFactory(created_by=manager)

        self.client.force_authenticate(user=manager)
        response = self.client.get(reverse('common:dashboard'))
        self.assertEqual(response.status_code, 200)
        data = response.data['data']
        # manager, member and the cashier that funded the member
        self.assertEqual(data['totalUsers'], 3)
        self.assertEqual(data['totalTransactions'], 1)
        self.assertEqual(data['pendingRedemptions'], 1)
        self.assertEqual(data['activePromotions'], 1)
        self.assertEqual(data['upcomingEvents'], 1)

    def test_dashboard_is_manager_only(self):
        self.client.force_authenticate(user=CashierFactory())
        self.assertEqual(self.client.get(reverse('common:dashboard')).status_code, 403)


class TestHealthCheck(TestCase):

    def test_health(self):
        response = self.client.get(reverse('common:health_check'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')


class TestReconcileCommand(TestCase):

    def setUp(self):
        self.member = UserFactory()
        fund(self.member, 25)

    def test_reports_in_sync(self):
        out = StringIO()
        call_command('reconcile_points', stdout=out)
        self.assertIn('All balances match the ledger', out.getvalue())

    def test_detects_and_fixes_drift(self):
        User.objects.filter(pk=self.member.pk).update(points=999)

        out = StringIO()
        call_command('reconcile_points', '--user-id', str(self.member.pk), stdout=out)
        self.assertIn('cached 999, ledger 25', out.getvalue())
        self.member.refresh_from_db()
        self.assertEqual(self.member.points, 999)

        call_command('reconcile_points', '--fix', stdout=StringIO())
        self.member.refresh_from_db()
        self.assertEqual(self.member.points, 25)


class TestReconcileUnderConcurrentAward(TransactionTestCase):

    def setUp(self):
        self.member = UserFactory()
        self.cashier = CashierFactory()
        LedgerService.award(self.member.pk, 25, self.cashier)
        User.objects.filter(pk=self.member.pk).update(points=999)

    def test_award_during_fix_is_not_lost(self):
        compute_balance = LedgerService.compute_balance
        awarders = []

        def award():
            try:
                LedgerService.award(self.member.pk, 10, self.cashier, note='while reconciling')
            finally:
                connection.close()

        def compute_then_race(member_id):
            balance = compute_balance(member_id)
            # Another cashier awards between the ledger read and the reset
            thread = threading.Thread(target=award)
            thread.start()
            awarders.append(thread)
            time.sleep(0.3)
            return balance

        with patch.object(LedgerService, 'compute_balance', side_effect=compute_then_race):
            call_command('reconcile_points', '--fix', '--user-id', str(self.member.pk), stdout=StringIO())
        for thread in awarders:
            thread.join(timeout=30)

        self.assertEqual(len(awarders), 1)
        self.member.refresh_from_db()
        self.assertEqual(LedgerService.compute_balance(self.member.pk), 35)
        self.assertEqual(self.member.points, 35)
