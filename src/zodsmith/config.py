"""
Configuration module for ZodSmith.

Handles environment variables and default settings. The generators
themselves take an explicit OutputConfig; these values only supply the
defaults used by the CLI, the function tools and the MCP server.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from zodsmith.models.schema_definition import OutputConfig

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class ZodSmithConfig:
    """Configuration settings for ZodSmith."""

    # Output defaults
    type_style: str = "infer"
    include_exports: bool = True
    schema_name_suffix: str = "Schema"
    type_name_suffix: str = ""
    include_comments: bool = True
    semicolons: bool = True

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Logging
    log_level: str = "INFO"

    indent_json_output: int = 2

    def get_output_config(self) -> OutputConfig:
        """Get an OutputConfig built from the configured defaults."""
        return OutputConfig(
            type_style=self.type_style,
            include_exports=self.include_exports,
            schema_name_suffix=self.schema_name_suffix,
            type_name_suffix=self.type_name_suffix,
            include_comments=self.include_comments,
            semicolons=self.semicolons,
        )

    @classmethod
    def from_env(cls) -> "ZodSmithConfig":
        """
        Create configuration from environment variables.

        Variables that are not set fall back to the class field defaults.
        """
        _defaults = cls()

        return cls(
            type_style=os.getenv("ZODSMITH_TYPE_STYLE", _defaults.type_style),
            include_exports=_env_bool("ZODSMITH_INCLUDE_EXPORTS", _defaults.include_exports),
            schema_name_suffix=os.getenv("ZODSMITH_SCHEMA_SUFFIX", _defaults.schema_name_suffix),
            type_name_suffix=os.getenv("ZODSMITH_TYPE_SUFFIX", _defaults.type_name_suffix),
            include_comments=_env_bool("ZODSMITH_INCLUDE_COMMENTS", _defaults.include_comments),
            semicolons=_env_bool("ZODSMITH_SEMICOLONS", _defaults.semicolons),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            log_level=os.getenv("ZODSMITH_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = ZodSmithConfig.from_env()


def get_config() -> ZodSmithConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> ZodSmithConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
