"""
The example models used throughout the notes.

They follow the ones in Django's own documentation so that the notes can be
read side by side with it:

* Blog / Author / Entry: the QuerySet and field lookup examples. An Entry
  belongs to one Blog (many-to-one) and has many Authors (many-to-many).
* Manufacturer / Car: the smallest many-to-one, used for cascade deletes.
* Pizza / Topping: the smallest many-to-many.
* Place / Restaurant: one-to-one, where a Restaurant *is* a Place.
"""
from __future__ import annotations

from django.db import models

__all__ = [
    "Blog",
    "Author",
    "Entry",
    "Manufacturer",
    "Car",
    "Topping",
    "Pizza",
    "Place",
    "Restaurant",
]


class Blog(models.Model):
    name = models.CharField(max_length=100)
    tagline = models.TextField()

    def __str__(self):
        return self.name


class Author(models.Model):
    name = models.CharField(max_length=200)
    email = models.EmailField()

    def __str__(self):
        return self.name


class Entry(models.Model):
    """
    A blog post.

    ``blog`` is the many-to-one side (``blog.entry_set`` goes the other way),
    ``authors`` the many-to-many side (``author.entry_set``).
    """
    blog = models.ForeignKey(Blog, on_delete=models.CASCADE)
    headline = models.CharField(max_length=255)
    body_text = models.TextField()
    pub_date = models.DateField()
    mod_date = models.DateField(auto_now=True)
    authors = models.ManyToManyField(Author)
    number_of_comments = models.IntegerField(default=0)
    number_of_pingbacks = models.IntegerField(default=0)
    rating = models.IntegerField(default=5)

    class Meta:
        verbose_name_plural = "entries"

    def __str__(self):
        return self.headline


class Manufacturer(models.Model):
    name = models.CharField(max_length=100)

    def __str__(self):
        return self.name


class Car(models.Model):
    # Deleting a Manufacturer deletes its cars too.
    manufacturer = models.ForeignKey(Manufacturer, on_delete=models.CASCADE)
    name = models.CharField(max_length=100)

    def __str__(self):
        return self.name


class Topping(models.Model):
    name = models.CharField(max_length=50)

    def __str__(self):
        return self.name


class Pizza(models.Model):
    name = models.CharField(max_length=50)
    toppings = models.ManyToManyField(Topping)

    def __str__(self):
        return self.name


class Place(models.Model):
    name = models.CharField(max_length=50)
    address = models.CharField(max_length=80)

    def __str__(self):
        return f"{self.name} the place"


class Restaurant(models.Model):
    """
    A Place that is also a restaurant.

    The one-to-one link is the primary key, so a Restaurant has the same id as
    its Place, and there can be at most one Restaurant per Place.
    """
    place = models.OneToOneField(
        Place,
        on_delete=models.CASCADE,
        primary_key=True,
    )
    serves_hot_dogs = models.BooleanField(default=False)
    serves_pizza = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.place.name} the restaurant"
