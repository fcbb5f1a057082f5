"""
List service implementation for godeps.

"""
import logging
from typing import List, Optional, Tuple

from godeps.batcher import QueryBatcher
from godeps.classify import FilterOptions
from godeps.formatters import OutputFormat, render
from godeps.interfaces.query import IPackageQuery
from godeps.models import PackageInfo
from godeps.query import GoListQuery
from godeps.rich_utils.ui_helpers import get_console
from godeps.utils.exceptions import GodepsError
from godeps.utils.log_setup import setup_logging

from godeps.core.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class ListService:
    """Resolves, collects, filters and prints package dependency information."""

    def __init__(self, query: Optional[IPackageQuery] = None):
        self.config_manager = ConfigManager()
        self.console = get_console()
        self.query = query

    def create_query(self, config: dict) -> IPackageQuery:
        """Build the go list query from the query section of the config."""
        query_config = config["query"]
        return GoListQuery(
            go_binary=query_config["go_binary"],
            timeout=query_config.get("timeout"),
        )

    def collect_packages(
        self,
        query: IPackageQuery,
        config: dict,
        package: Optional[str],
        options: FilterOptions,
    ) -> List[PackageInfo]:
        """Resolve the root package, collect its dependencies and filter them."""
        if not package:
            package = query.query_current_package()
            logger.info("Using package of the current directory: %s", package)

        batcher = QueryBatcher(query, max_chars=config["query"]["max_batch_chars"])
        packages = batcher.collect(package)
        filtered = options.apply(packages)
        logger.info("%d of %d packages match the filters", len(filtered), len(packages))
        return filtered

    def _error(self, message: str):
        self.console.print(message, style="bold red", markup=False, highlight=False, soft_wrap=True)

    def execute_list(
        self,
        package: Optional[str] = None,
        options: Optional[FilterOptions] = None,
        output_format: OutputFormat = OutputFormat.PLAIN,
        config_path: Optional[str] = None,
    ) -> Tuple[int, List[PackageInfo]]:
        """Execute the list workflow and print the result to stdout."""
        options = options or FilterOptions()

        try:
            config = self.config_manager.discover_and_load_config(config_path)
            setup_logging(config.get("logging", {}).get("level", "WARNING"))

            query = self.query or self.create_query(config)
            if not query.is_available():
                binary = config["query"]["go_binary"]
                self._error(f'Command "{binary}" not found')
                return 1, []

            packages = self.collect_packages(query, config, package, options)

        except KeyboardInterrupt:
            self.console.print("\n⚠️ Interrupted by user", style="bold yellow")
            return 130, []
        except GodepsError as e:
            self._error(str(e))
            return 1, []

        if not packages:
            self._error("no information")
            return 1, []

        print(render(packages, output_format))
        return 0, packages
