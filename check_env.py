#!/usr/bin/env python3
"""Helper script to check the .env file and the coverage data it points at."""

from pathlib import Path
import sys

TEMPLATE = """# API Configuration
FDL_API_PREFIX=/api
# FDL_FRONTEND_ALLOWED_ORIGINS accepts a JSON array or a comma-separated list
# FDL_FRONTEND_ALLOWED_ORIGINS=http://localhost:3000,https://www.fdlwarehouse.com

# ZIP coverage table (CSV or XLSX with Zone, Zip, City, DeliveryDays columns)
FDL_COVERAGE_FILE=./data/Zones.csv
# FDL_COVERAGE_URL=https://www.fdlwarehouse.com/data/Zones.csv
FDL_COVERAGE_TIMEOUT_SECONDS=10
FDL_COVERAGE_MAX_RETRIES=1

# Quote request relay (Apps Script web app URL)
FDL_CONTACT_ENDPOINT_URL=
"""


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("FDL site environment checker")
    print("=" * 60)

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"✅ Created template .env file at: {env_file}")
        print("⚠️  Set FDL_CONTACT_ENDPOINT_URL before accepting quote requests.")
    else:
        print(f"✅ Found .env file at: {env_file}")

    sys.path.insert(0, str(project_root / "src"))
    from fdl_site.config import settings
    from fdl_site.data.coverage_repository import load_coverage_file

    if settings.coverage_url:
        print(f"ℹ️  Coverage is fetched from {settings.coverage_url} at startup")
    else:
        try:
            table = load_coverage_file(settings.coverage_file)
        except (OSError, ValueError) as exc:
            print(f"❌ Coverage data not usable: {exc}")
            return 1
        print(
            f"✅ Coverage file {settings.coverage_file}: {len(table)} ZIPs "
            f"({table.duplicate_rows} duplicate rows, {table.rows_skipped} without a valid ZIP)"
        )

    if settings.contact_endpoint_url:
        print("✅ Contact endpoint configured")
    else:
        print("❌ FDL_CONTACT_ENDPOINT_URL is not set; quote requests will fail")
    return 0


if __name__ == "__main__":
    sys.exit(main())
