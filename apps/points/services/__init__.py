"""
Points services module.
"""
from .ledger_service import LedgerService
from .redemption_service import RedemptionService
from .scan_service import ScanService, ScanResult

__all__ = [
    'LedgerService',
    'RedemptionService',
    'ScanService',
    'ScanResult',
]
