""" URL configuration for blockview project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.urls import include, path

urlpatterns = [
    path('', include('blocks.urls')),
]
