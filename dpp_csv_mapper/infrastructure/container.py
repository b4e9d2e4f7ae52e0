from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.mapping_use_case import CsvMappingUseCase, MappingDependencies
from ..config import MapperConfig
from .io.csv_reader import CSVReader
from .io.json_writer import JSONRecordWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.mapping_config_repository import MappingConfigRepository
from .repositories.schema_field_repository import SchemaFieldRepository

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: MapperConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or MapperConfig()
        self._logger_instance: LoggerPort | None = logger
        self._csv_reader_instance: CSVReader | None = None
        self._field_repository_instance: SchemaFieldRepository | None = None
        self._mapping_repository_instance: MappingConfigRepository | None = None
        self._record_writer_instance: JSONRecordWriter | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_field_repository(self) -> SchemaFieldRepository:
        if self._field_repository_instance is None:
            self._field_repository_instance = SchemaFieldRepository()
        return self._field_repository_instance

    def create_mapping_repository(self) -> MappingConfigRepository:
        if self._mapping_repository_instance is None:
            self._mapping_repository_instance = MappingConfigRepository()
        return self._mapping_repository_instance

    def create_record_writer(self) -> JSONRecordWriter:
        if self._record_writer_instance is None:
            self._record_writer_instance = JSONRecordWriter()
        return self._record_writer_instance

    def create_mapping_use_case(self) -> CsvMappingUseCase:
        dependencies = MappingDependencies(
            logger=self.create_logger(),
            csv_reader=self.create_csv_reader(),
            field_repository=self.create_field_repository(),
            mapping_repository=self.create_mapping_repository(),
            record_writer=self.create_record_writer(),
            config=self.config,
            verbose=self.verbose,
        )
        return CsvMappingUseCase(dependencies)
