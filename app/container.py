"""Dependency Injection container - initialized at app startup."""

from app.services.alerts import AlertAggregator, SeverityPolicy
from app.services.benford import BenfordAnalyzer
from app.services.composite import GlueFinIndex
from app.services.klimek import KlimekAnalyzer
from app.services.network import NetworkAnalyzer
from app.services.ocr import CrossValidator
from app.services.pvt import PvtGapAnalyzer
from app.services.spatial import SpatialAnalyzer


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all analyzers. Call once at app startup."""
        if self._initialized:
            return

        # One policy shared by every analyzer
        self.policy = SeverityPolicy()

        self.klimek = KlimekAnalyzer(policy=self.policy)
        self.benford = BenfordAnalyzer(policy=self.policy)
        self.network = NetworkAnalyzer(policy=self.policy)
        self.spatial = SpatialAnalyzer(policy=self.policy)
        self.cross_validator = CrossValidator(policy=self.policy)
        self.pvt = PvtGapAnalyzer(policy=self.policy)
        self.glue_fin = GlueFinIndex()

        self.alerts = AlertAggregator()

        self._initialized = True


# Global container instance
container = Container()
