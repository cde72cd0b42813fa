"""
macrokit - Dialect dispatch and naming policies for SQL macros
Copyright © 2025 Ilona Tag

This file is part of macrokit.

macrokit is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

macrokit is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with macrokit. If not, see <https://www.gnu.org/licenses/>.

Contact: <https://github.com/elevata-labs/macrokit>.
"""

# Dialect key of the fallback template every operation must carry
FALLBACK_DIALECT = "default"

DIALECT_CHOICES = sorted([
  ("bigquery", "Google BigQuery"),
  ("postgres", "PostgreSQL"),
  ("sqlserver", "SQL Server / Azure Synapse / Fabric"),
  ("snowflake", "Snowflake"),
  ("redshift", "Amazon Redshift"),
], key=lambda x: x[1])

# Warehouse tags used by other tools that map onto a canonical dialect
DIALECT_ALIASES = {
  "bq": "bigquery",
  "postgresql": "postgres",
  "mssql": "sqlserver",
  "fabric": "sqlserver",
  "synapse": "sqlserver",
}

# Built-in operation names
OP_CENTS_TO_DOLLARS = "cents-to-dollars"
OP_DATE_TRUNCATE = "date-truncate"
OP_DATE_ADD = "date-add"
OP_CAST_TO_STRING = "cast-to-string"
OP_HASH_MD5 = "hash-md5"
OP_CONCAT = "concat"

# Resource classifications for the naming policy
SEED_LIKE = "seed-like"
MODEL_LIKE = "model-like"

CLASSIFICATION_ALIASES = {
  "seed": SEED_LIKE,
  "model": MODEL_LIKE,
  "snapshot": MODEL_LIKE,
  "view": MODEL_LIKE,
  "table": MODEL_LIKE,
  "incremental": MODEL_LIKE,
}

PROD_ENVIRONMENT = "prod"
