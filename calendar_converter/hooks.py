app_name = "calendar_converter"
app_title = "Calendar Converter"
app_publisher = "Calendar Converter Contributors"
app_description = "Convert dates between the Gregorian, Julian and Hebrew calendars."
app_email = "maintainers@example.com"
app_license = "MIT"

# Boot
boot_session = "calendar_converter.boot.boot_session"

# Fixtures / Data
fixtures = []
