"""
Storage for persisted symptom analyses.

Two backends share one interface: an in-process store for development and
tests, and a Redis-backed store for deployments with more than one worker.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from telehealth.config import get_settings
from telehealth.core.logging import get_logger
from telehealth.schemas.common import utcnow
from telehealth.schemas.symptoms import AnalysisResult, SymptomAnalysisRecord

logger = get_logger(__name__)

KEY_PREFIX = "telehealth"


def _build_record(
    record_id: int,
    patient_id: str,
    symptoms: str,
    age: str,
    gender: str,
    analysis: AnalysisResult
) -> SymptomAnalysisRecord:
    return SymptomAnalysisRecord(
        id=record_id,
        patient_id=patient_id,
        symptoms=symptoms,
        age=age,
        gender=gender,
        analysis=analysis,
        recommendations="; ".join(analysis.recommendations),
        created_at=utcnow()
    )


class SymptomAnalysisRepository(ABC):
    """Persistence interface for symptom analyses."""

    backend: str = "abstract"

    @property
    def is_connected(self) -> bool:
        return True

    @abstractmethod
    async def create(
        self,
        patient_id: str,
        symptoms: str,
        age: str,
        gender: str,
        analysis: AnalysisResult
    ) -> SymptomAnalysisRecord:
        """Persist an analysis and return the stored record."""
        pass

    @abstractmethod
    async def get(self, record_id: int) -> Optional[SymptomAnalysisRecord]:
        """Fetch a record by id, or None."""
        pass

    @abstractmethod
    async def list_by_patient(self, patient_id: str) -> list[SymptomAnalysisRecord]:
        """All records of a patient, newest first."""
        pass

    async def close(self) -> None:
        pass


class InMemorySymptomAnalysisRepository(SymptomAnalysisRepository):
    """Process-local store. Data is lost on restart."""

    backend = "memory"

    def __init__(self) -> None:
        self._records: dict[int, SymptomAnalysisRecord] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, patient_id, symptoms, age, gender, analysis):
        async with self._lock:
            record = _build_record(self._next_id, patient_id, symptoms, age, gender, analysis)
            self._records[record.id] = record
            self._next_id += 1
        return record

    async def get(self, record_id: int) -> Optional[SymptomAnalysisRecord]:
        return self._records.get(record_id)

    async def list_by_patient(self, patient_id: str) -> list[SymptomAnalysisRecord]:
        records = [r for r in self._records.values() if r.patient_id == patient_id]
        return sorted(records, key=lambda r: r.id, reverse=True)


class RedisSymptomAnalysisRepository(SymptomAnalysisRepository):
    """Redis-backed store with JSON-encoded records."""

    backend = "redis"

    def __init__(self, url: str) -> None:
        self._url = url
        self._pool: Optional[ConnectionPool] = None
        self._client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """
        Establish connection to Redis.

        Raises:
            redis.RedisError: If the server cannot be reached.
        """
        self._pool = ConnectionPool.from_url(
            self._url,
            max_connections=50,
            decode_responses=True
        )
        self._client = redis.Redis(connection_pool=self._pool)
        await self._client.ping()
        logger.info("Connected to Redis", extra={"url": self._url})

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def _require_client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("Redis repository is not connected")
        return self._client

    @staticmethod
    def _record_key(record_id: int) -> str:
        return f"{KEY_PREFIX}:symptom_analysis:{record_id}"

    @staticmethod
    def _patient_key(patient_id: str) -> str:
        return f"{KEY_PREFIX}:patient:{patient_id}:symptom_analyses"

    async def create(self, patient_id, symptoms, age, gender, analysis):
        client = self._require_client()
        record_id = await client.incr(f"{KEY_PREFIX}:symptom_analysis:next_id")
        record = _build_record(record_id, patient_id, symptoms, age, gender, analysis)

        async with client.pipeline(transaction=True) as pipe:
            pipe.set(self._record_key(record_id), record.model_dump_json(by_alias=True))
            pipe.lpush(self._patient_key(patient_id), record_id)
            await pipe.execute()

        logger.debug(f"Stored symptom analysis {record_id}")
        return record

    async def get(self, record_id: int) -> Optional[SymptomAnalysisRecord]:
        client = self._require_client()
        raw = await client.get(self._record_key(record_id))
        if raw is None:
            return None
        return SymptomAnalysisRecord.model_validate_json(raw)

    async def list_by_patient(self, patient_id: str) -> list[SymptomAnalysisRecord]:
        client = self._require_client()
        ids = await client.lrange(self._patient_key(patient_id), 0, -1)
        if not ids:
            return []

        raw_records = await client.mget([self._record_key(int(i)) for i in ids])
        return [
            SymptomAnalysisRecord.model_validate_json(raw)
            for raw in raw_records
            if raw is not None
        ]

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
        if self._pool:
            await self._pool.disconnect()
            self._pool = None
        logger.info("Disconnected from Redis")


# Singleton instance
_repository: Optional[SymptomAnalysisRepository] = None


async def get_analysis_repository() -> SymptomAnalysisRepository:
    """Get the global repository, connecting on first use."""
    global _repository
    if _repository is None:
        settings = get_settings()

        if settings.STORAGE_BACKEND == "redis":
            repository = RedisSymptomAnalysisRepository(settings.REDIS_URL)
            try:
                await repository.connect()
                _repository = repository
            except Exception as e:
                logger.warning(f"Redis connection failed: {e}. Using in-memory storage.")
                await repository.close()

        if _repository is None:
            _repository = InMemorySymptomAnalysisRepository()

    return _repository


async def close_analysis_repository() -> None:
    """Close the global repository."""
    global _repository
    if _repository is not None:
        await _repository.close()
        _repository = None
