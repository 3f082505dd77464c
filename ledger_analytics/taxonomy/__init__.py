"""
Closed vocabularies shared across the package.

entry_taxonomy     : EntryType, ExpenseCategory
lifecycle_taxonomy : LifecycleCategory, CategoryDisplay, get_category_display()
"""
