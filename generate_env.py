#!/usr/bin/env python3
"""
Environment Configuration Generator for the Order Management API

This script generates a .env file with:
- Database connection settings (MySQL, or SQLite when no host is given)
- A random database password for production setups
- Server, logging and order workflow settings

Usage:
    python generate_env.py              # Interactive mode
    python generate_env.py --force      # Overwrite existing .env
    python generate_env.py --dev        # Development mode (predictable values)
    python generate_env.py --sqlite     # Skip MySQL settings, use the local SQLite file
"""

import argparse
import os
import secrets
import shutil
import string
import sys
from datetime import datetime
from pathlib import Path


class EnvGenerator:
    """Generate environment configuration for the API"""

    def __init__(self, dev_mode=False, use_sqlite=False, env_file=None):
        self.dev_mode = dev_mode
        self.use_sqlite = use_sqlite
        self.env_file = Path(env_file) if env_file else Path(__file__).parent / '.env'

    def generate_password(self, length=20):
        """
        Generate a random database password

        Only letters and digits are used so the value survives both .env
        parsing and URL quoting unchanged.
        """
        if self.dev_mode:
            return "order-dev-password"

        alphabet = string.ascii_letters + string.digits
        password = [
            secrets.choice(string.ascii_lowercase),
            secrets.choice(string.ascii_uppercase),
            secrets.choice(string.digits),
        ]
        for _ in range(length - len(password)):
            password.append(secrets.choice(alphabet))

        secrets.SystemRandom().shuffle(password)
        return ''.join(password)

    def database_settings(self):
        """Database variables read by app.config.build_database_uri"""
        if self.use_sqlite:
            return {}
        return {
            'DB_HOST': 'localhost',
            'DB_PORT': '3307',
            'DB_USERNAME': 'root',
            'DB_PASSWORD': self.generate_password(),
            'DB_NAME': 'order_db',
        }

    def create_env_content(self):
        """Create the full .env file content"""
        db_settings = self.database_settings()

        if db_settings:
            database_block = "\n".join(f'{key}="{value}"' if key == 'DB_PASSWORD' else f"{key}={value}"
                                       for key, value in db_settings.items())
        else:
            database_block = "# No DB_HOST: the API uses instance/order_management.db (SQLite)"

        content = f"""# Order Management API Environment Configuration
# Generated: {self._get_timestamp()}
#
# Keep this file out of version control.

# ============================================================================
# Server
# ============================================================================

HOST=0.0.0.0
PORT=5003
FLASK_DEBUG={'True' if self.dev_mode else 'False'}

# ============================================================================
# Database
# ============================================================================
# DATABASE_URL, when set, takes precedence over the DB_* variables.

{database_block}

# ============================================================================
# Logging
# ============================================================================

# DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL={'DEBUG' if self.dev_mode else 'INFO'}

# Directory for order_management.log and errors.log (empty disables file logs)
LOG_DIR=logs

# ============================================================================
# Orders
# ============================================================================

# Product whose stock an order update/delete adjusts:
#   product  - the order's own product
#   order_id - the product whose id equals the order id (legacy behaviour)
ORDER_PRODUCT_LOOKUP=product
DEFAULT_PAGE_SIZE=10

# ============================================================================
# Rate limiting and CORS
# ============================================================================

RATELIMIT_ENABLED={'False' if self.dev_mode else 'True'}
RATELIMIT_DEFAULT=200 per minute
RATELIMIT_STORAGE_URI=memory://
CORS_ORIGIN=*
"""
        return content, db_settings

    def _get_timestamp(self):
        """Get current timestamp for documentation"""
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def file_exists(self):
        """Check if .env file already exists"""
        return self.env_file.exists()

    def create_backup(self):
        """Create backup of existing .env file"""
        if not self.file_exists():
            return None

        stamp = self._get_timestamp().replace(":", "-").replace(" ", "_")
        backup_path = self.env_file.parent / f'.env.backup.{stamp}'
        shutil.copy2(self.env_file, backup_path)
        return backup_path

    def write_env_file(self, content):
        """Write content to .env file"""
        with open(self.env_file, 'w') as f:
            f.write(content)

        # Owner read/write only
        os.chmod(self.env_file, 0o600)

    def display_settings(self, db_settings):
        """Display generated database settings to user"""
        print("\n" + "=" * 80)
        print("GENERATED SETTINGS")
        print("=" * 80)

        if not db_settings:
            print("\nDatabase: SQLite (instance/order_management.db)")
        else:
            print("\nDatabase: MySQL")
            for key, value in db_settings.items():
                print(f"   {key}={value}")

        print("\nNext Steps:")
        print("   1. Create the database named in DB_NAME (MySQL only)")
        print("   2. Run: python run.py --build-only --seed")
        print("   3. Run: python run.py")

        if self.dev_mode:
            print("\nDEV MODE: predictable password, debug on, rate limiting off.")

        print("\n" + "=" * 80 + "\n")

    def generate(self, force=False):
        """
        Generate .env file

        Args:
            force: Overwrite existing .env file without prompting

        Returns:
            bool: True when the file was written
        """
        if self.file_exists() and not force:
            print(f"\nFile {self.env_file} already exists!")
            response = input("Do you want to overwrite it? (yes/no): ").lower().strip()

            if response not in ['yes', 'y']:
                print("Aborted. Existing .env file was not modified.")
                return False

            backup_path = self.create_backup()
            if backup_path:
                print(f"Backup created: {backup_path}")

        content, db_settings = self.create_env_content()
        self.write_env_file(content)
        print(f"Created: {self.env_file}")

        self.display_settings(db_settings)
        return True


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Generate .env configuration for the Order Management API',
    )
    parser.add_argument('--force', '-f', action='store_true',
                        help='Overwrite existing .env file without prompting')
    parser.add_argument('--dev', '-d', action='store_true',
                        help='Development mode: predictable values (NOT FOR PRODUCTION!)')
    parser.add_argument('--sqlite', action='store_true',
                        help='Omit MySQL settings and use the local SQLite database')
    parser.add_argument('--output', '-o', default=None,
                        help='Path of the file to write (default: .env beside this script)')

    args = parser.parse_args(argv)

    generator = EnvGenerator(dev_mode=args.dev, use_sqlite=args.sqlite, env_file=args.output)
    return 0 if generator.generate(force=args.force) else 1


if __name__ == '__main__':
    sys.exit(main())
