"""
Reset focus statistics by clearing the focus log database.
Optionally also drops the saved timer settings.
"""

import os
from BackEnd.core.paths import db_path
from BackEnd.repos import settings_repo

def reset_all_stats():
    """Delete the database file to reset all stats."""
    db_file = db_path()

    if db_file.exists():
        print(f"Found database at: {db_file}")

        confirm = input("Are you sure you want to reset all focus stats? This cannot be undone. (yes/no): ")

        if confirm.lower() in ['yes', 'y']:
            try:
                os.remove(db_file)
                print("Database deleted. All focus stats have been reset.")
            except OSError as e:
                print(f"Error deleting database: {e}")
        else:
            print("Reset cancelled.")
    else:
        print("No database found. Stats are already at 0.")

    confirm_settings = input("\nAlso restore default timer durations? (yes/no): ")
    if confirm_settings.lower() in ['yes', 'y']:
        if settings_repo.clear_settings():
            print("Saved timer settings removed.")
        else:
            print("No saved timer settings found.")

if __name__ == "__main__":
    print("=" * 50)
    print("JEE Progress - Reset Focus Stats")
    print("=" * 50)
    reset_all_stats()
