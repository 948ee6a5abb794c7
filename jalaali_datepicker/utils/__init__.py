# jalaali_datepicker/utils/__init__.py
