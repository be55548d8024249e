"""
GraphQL documents for the Android cache.

Paginated documents take $offset and $limit; the rest return the whole
collection in one response.
"""

COUNTRIES = """
query JFPAppCacheBuilder_Android_CountriesQuery($languageId: ID!) {
  countries {
    countryId: id
    name: name(languageId: $languageId) {
      value
    }
    continent {
      continentName: name(languageId: $languageId) {
        value
      }
    }
    languageHavingMediaCount
    population
    longitude
    latitude
    flagLossyWeb: flagWebpSrc
    flagPng8: flagPngSrc
  }
}
"""

COUNTRY_TRANSLATIONS = """
query JFPAppCacheBuilder_Android_CountryTranslationsQuery {
  countries {
    countryId: id
    name {
      value
      language {
        id
        bcp47
      }
    }
  }
}
"""

MEDIA_DATA = """
query JFPAppCacheBuilder_Android_MediaDataQuery($offset: Int, $limit: Int) {
  videos(offset: $offset, limit: $limit) {
    id
    primaryMediaLanguageId: primaryLanguageId
    subType: label
    variant {
      lengthInMilliseconds
      isDownloadable: downloadable
      downloads {
        quality
        size
      }
    }
    languageCount: variantLanguagesCount
    containsCount: childrenCount
    bibleCitations {
      chapterStart
      chapterEnd
      osisBibleBook: osisId
      verseEnd
      verseStart
    }
    imageUrls: images {
      mobileCinematicHigh
      mobileCinematicLow
      mobileCinematicVeryLow
      thumbnail
      videoStill
    }
    children {
      id
    }
    parents {
      id
    }
  }
}
"""

MEDIA_LANGUAGES = """
query JFPAppCacheBuilder_Android_MediaLanguagesQuery($englishLanguageId: ID!) {
  languages {
    mediaLanguageId: id
    name(languageId: $englishLanguageId) {
      value
    }
    nameNative: name(primary: true) {
      value
    }
    iso3
    bcp47
    audioPreviewURL: audioPreview {
      value
    }
    countryLanguages {
      country {
        id
      }
      primary
      speakerCount: displaySpeakers
    }
  }
}
"""

MEDIA_LANGUAGE_LINKS = """
query JFPAppCacheBuilder_Android_MediaLanguageLinksQuery($limit: Int, $offset: Int) {
  videos(limit: $limit, offset: $offset) {
    id
    languageIds: variantLanguages {
      id
    }
  }
}
"""

MEDIA_LANGUAGE_TRANSLATIONS = """
query JFPAppCacheBuilder_Android_MediaLanguageTranslationsQuery {
  languages {
    id
    name {
      value
      language {
        metadataLanguageTag: bcp47
      }
    }
  }
}
"""

MEDIA_METADATA = """
query JFPAppCacheBuilder_Android_MediaMetadataQuery($limit: Int, $offset: Int) {
  videos(limit: $limit, offset: $offset) {
    id
    title {
      value
      language {
        metadataLanguageTag: bcp47
      }
    }
    longDescription: description {
      value
      language {
        metadataLanguageTag: bcp47
      }
    }
    shortDescription: snippet {
      value
      language {
        metadataLanguageTag: bcp47
      }
    }
    studyQuestions {
      value
      order
      language {
        metadataLanguageTag: bcp47
      }
    }
  }
}
"""

SPOKEN_LANGUAGES = """
query JFPAppCacheBuilder_Android_SpokenLanguagesQuery {
  countries {
    countryId: id
    countryLanguages {
      language {
        id
      }
      speakers
    }
  }
}
"""

SUGGESTED_LANGUAGES = """
query JFPAppCacheBuilder_Android_SuggestedLanguagesQuery {
  countries {
    countryId: id
    countryLanguages {
      language {
        id
      }
      suggested
      languageRank: order
    }
  }
}
"""

TERM_TRANSLATIONS = """
query JFPAppCacheBuilder_Android_TermTranslationsQuery {
  taxonomies {
    label: term
    term: name {
      value: label
      language {
        languageTag: bcp47
      }
    }
  }
}
"""
