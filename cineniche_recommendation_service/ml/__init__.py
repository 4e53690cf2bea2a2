"""Recommendation scoring"""
