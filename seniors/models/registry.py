from django.db import models


class RegistryRecord(models.Model):
    """
    Record from an external registry: civil registry births (LCR) or the
    PWD registry. Used as search input to start an enrollment.
    """

    TYPE_LCR = "LCR"
    TYPE_PWD = "PWD"

    TYPE_CHOICES = [
        (TYPE_LCR, "Local Civil Registry"),
        (TYPE_PWD, "Persons with Disability"),
    ]

    id = models.CharField(max_length=64, primary_key=True)
    type = models.CharField(max_length=8, choices=TYPE_CHOICES, db_index=True)
    first_name = models.CharField(max_length=100, blank=True, default="")
    middle_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    full_name = models.CharField(
        max_length=255, blank=True, default="", help_text="Raw combined name when parts are absent"
    )
    suffix = models.CharField(max_length=20, blank=True, default="")
    citizenship = models.CharField(max_length=50, blank=True, default="")
    birth_date = models.CharField(max_length=32, blank=True, default="")
    birth_place = models.CharField(max_length=255, blank=True, default="")
    sex = models.CharField(max_length=20, blank=True, default="")
    civil_status = models.CharField(max_length=50, blank=True, default="")
    province = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=255, blank=True, default="")
    district = models.CharField(max_length=100, blank=True, default="")
    barangay = models.CharField(max_length=255, blank=True, default="")
    street = models.CharField(max_length=255, blank=True, default="")
    house_no = models.CharField(max_length=50, blank=True, default="")
    address = models.CharField(max_length=500, blank=True, default="")
    is_registered = models.BooleanField(default=False)
    status = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        db_table = "registry_records"
        ordering = ["last_name", "first_name", "id"]

    def __str__(self):
        return f"{self.type} {self.id}"
