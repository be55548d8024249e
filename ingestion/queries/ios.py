"""
GraphQL documents for the iOS cache.

$languageId selects the localized text; $englishLanguageId selects the
English fallback fields.
"""

BIBLE_CODES = """
query JFPAppCacheBuilder_iOS_BibleCodeQuery($languageId: ID!, $englishLanguageId: ID!) {
  bibleBooks {
    name: osisId
    englishFullName: name(languageId: $englishLanguageId) {
      value
    }
    fullName: name(languageId: $languageId) {
      value
    }
  }
}
"""

COUNTRY_LINKS = """
query JFPAppCacheBuilder_iOS_CountryLinkQuery {
  countries {
    id
    countryLanguages {
      language {
        id
      }
      speakerCount: displaySpeakers
    }
  }
}
"""

LANGUAGES = """
query JFPAppCacheBuilder_iOS_LanguageQuery($languageId: ID!, $englishLanguageId: ID!) {
  languages {
    id
    audioPreviewURL: audioPreview {
      value
    }
    iso3
    bcp47
    englishName: name(languageId: $englishLanguageId) {
      value
    }
    name: name(languageId: $languageId) {
      value
    }
    nameNative: name(primary: true) {
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

SUGGESTED_LANGUAGES = """
query JFPAppCacheBuilder_iOS_SuggestedLanguageQuery {
  countries {
    id
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

COUNTRIES = """
query JFPAppCacheBuilder_iOS_CountryQuery($languageId: ID!, $englishLanguageId: ID!) {
  countries {
    countryId: id
    flagUrlPng: flagPngSrc
    flagUrlWebPLossy50: flagWebpSrc
    latitude
    longitude
    countryPopulation: population
    languageCount
    languageCountHavingMedia: languageHavingMediaCount
    continent {
      englishContinentName: name(languageId: $englishLanguageId) {
        value
      }
      continentName: name(languageId: $languageId) {
        value
      }
    }
    englishName: name(languageId: $englishLanguageId) {
      value
    }
    name: name(languageId: $languageId) {
      value
    }
    countryLanguages {
      suggested
      language {
        id
      }
    }
  }
}
"""

MEDIA_ITEMS = """
query JFPAppCacheBuilder_iOS_MediaItemQuery(
  $limit: Int
  $offset: Int
  $languageId: ID
  $englishLanguageId: ID
) {
  videos(limit: $limit, offset: $offset) {
    id
    languageCount: variantLanguagesCount
    primaryLanguageId
    subType: label
    images {
      highResImageUrl: mobileCinematicHigh
      lowResImageUrl: mobileCinematicLow
      veryLowResImageUrl: mobileCinematicVeryLow
      thumbnailUrl: thumbnail
      videoStillUrl: videoStill
    }
    languageIds: variantLanguages {
      id
    }
    variant(languageId: $languageId) {
      mediaComponentId: id
      lengthInSeconds: duration
      isDownloadable: downloadable
      downloads {
        quality
        approxDownloadSize: size
      }
    }
    groupContentCount: childrenCount
    englishLongDescription: description(languageId: $englishLanguageId) {
      value
    }
    longDescription: description(languageId: $languageId) {
      value
    }
    englishShortDescription: snippet(languageId: $englishLanguageId) {
      value
    }
    shortDescription: snippet(languageId: $languageId) {
      value
    }
    englishName: title(languageId: $englishLanguageId) {
      value
    }
    name: title(languageId: $languageId) {
      value
    }
    bibleCitationsData: bibleCitations {
      osisBibleBook: osisId
      verseStart
      verseEnd
      chapterStart
      chapterEnd
    }
    englishStudyQuestionsData: studyQuestions(languageId: $englishLanguageId) {
      value
    }
    studyQuestionsData: studyQuestions(languageId: $languageId) {
      value
    }
  }
}
"""

CONTAINED_BY_MEDIA_LINKS = """
query JFPAppCacheBuilder_iOS_ContainedByMediaLinkQuery {
  videos(where: { labels: [collection, series] }) {
    parentMediaComponentId: id
    children {
      mediaComponentId: id
    }
  }
}
"""
